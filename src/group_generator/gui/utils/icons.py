"""Material Design icons via QtAwesome."""
import qtawesome as qta
from group_generator.gui.styles.theme import get_colors

class MaterialIcons:
    """Centralized Material Design icon definitions using QtAwesome."""

    @staticmethod
    def shuffle(color=None):
        """Generate groups icon."""
        return qta.icon('mdi6.shuffle-variant', color=color or get_colors().TEXT_ON_PRIMARY)

    @staticmethod
    def plus(color=None):
        """Increase group size."""
        return qta.icon('mdi6.plus', color=color or get_colors().TEXT_SECONDARY)

    @staticmethod
    def minus(color=None):
        """Decrease group size."""
        return qta.icon('mdi6.minus', color=color or get_colors().TEXT_SECONDARY)

    @staticmethod
    def delete():
        """Clear/delete icon."""
        return qta.icon('mdi6.delete-outline', color=get_colors().ERROR)

    @staticmethod
    def content_copy():
        """Copy icon."""
        return qta.icon('mdi6.content-copy', color=get_colors().TEXT_SECONDARY)
