"""Limit parser."""

from typing import Optional

from ...core.entities.limit import Limit
from ...core.protocols.limit_collaborator import LimitCollaborator
from ...core.value_objects.option_list import OptionList
from ...core.value_objects.option_name import OptionName


class LimitParser:
    """Reads the ``limit`` option and hands it to the limit collaborator.

    Rejecting malformed limits is left to the collaborator, so parsing
    never fails here.
    """

    def __init__(self, limits: LimitCollaborator):
        self._limits = limits

    def parse(self, options: OptionList) -> Optional[Limit]:
        return self._limits.parse(options.get(OptionName.LIMIT))
