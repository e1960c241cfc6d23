from releasegate.domain.services.version_comparator import is_newer, parse_version

__all__ = ["is_newer", "parse_version"]
