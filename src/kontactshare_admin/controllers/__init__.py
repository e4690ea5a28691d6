# ABOUTME: Controllers package coordinating profile state over a ProfileStore.
# ABOUTME: Exports the list, selection, single-action and creation controllers.

from kontactshare_admin.controllers.actions import ProfileActions
from kontactshare_admin.controllers.creation import (
    CreationState,
    ProfileCreationWorkflow,
    is_default_value,
)
from kontactshare_admin.controllers.profile_list import ProfileListController
from kontactshare_admin.controllers.selection import SelectionController

__all__ = [
    "CreationState",
    "ProfileActions",
    "ProfileCreationWorkflow",
    "ProfileListController",
    "SelectionController",
    "is_default_value",
]
