from releasegate.infrastructure.manifest.manifest_reader import read_project_version

__all__ = ["read_project_version"]
