"""
Destination paths inside an Android project.

Every path is project-relative and "/"-separated so it can be used directly
as a storage key and printed in reports.
"""

from __future__ import annotations

import posixpath

from ..models.activity import ActivityRequest
from ..naming import package_to_path
from .config import ProjectLayoutConfig


class ProjectPaths:
    """Computes where generated and merged files live."""

    def __init__(self, layout: ProjectLayoutConfig | None = None) -> None:
        self.layout = layout or ProjectLayoutConfig()

    @property
    def source_root(self) -> str:
        return self.layout.source_root.strip("/")

    @property
    def res_root(self) -> str:
        return posixpath.join(self.source_root, self.layout.res_dir)

    @property
    def manifest(self) -> str:
        return posixpath.join(self.source_root, self.layout.manifest_name)

    @property
    def layout_dir(self) -> str:
        return posixpath.join(self.res_root, "layout")

    def package_dir(self, package: str) -> str:
        """Directory holding the classes of a dotted package."""
        return posixpath.join(self.source_root, self.layout.java_dir, package_to_path(package))

    def activity_class(self, request: ActivityRequest) -> str:
        return posixpath.join(
            self.package_dir(request.activity_package),
            f"{request.activity_name}.{self.layout.class_extension}",
        )

    def layout_file(self, request: ActivityRequest) -> str:
        return posixpath.join(self.layout_dir, f"{request.layout_name}.{self.layout.layout_extension}")

    def values_dir(self, qualifier: str = "") -> str:
        """Values directory, e.g. "values" or "values-w820dp"."""
        name = f"values-{qualifier}" if qualifier else "values"
        return posixpath.join(self.res_root, name)

    def values_file(self, file_name: str, qualifier: str = "") -> str:
        return posixpath.join(self.values_dir(qualifier), file_name)
