from releasegate.domain.entities.check_item import CheckItem

__all__ = ["CheckItem"]
