"""The interface shared by every screen of the game."""

from abc import ABC, abstractmethod


class Page(ABC):
    """A screen that reacts to events and draws itself.

    A page sets back_to_menu when it wants the game to return to the menu.
    """

    back_to_menu = False

    @abstractmethod
    def handle_event(self, event):
        """React to one pygame event."""

    @abstractmethod
    def draw(self, surface):
        """Draw the page onto the surface."""