"""
Scaffold Service.

Runs the write phase for one activity request, in a fixed order:

1. conflict check: the class file and layout file must not exist yet;
2. manifest pre-flight: the manifest must exist and contain <application>;
   the text read here is the one step 6 inserts into;
3. directory creation;
4. class and layout rendering;
5. resource merge for every value file the activity type depends on;
6. manifest registration.

Steps 1 and 2 touch nothing, so a conflict or a broken manifest stops the run
before any file is written. A conflict is an expected outcome and is reported;
every other failure propagates.
"""

from __future__ import annotations

from ...core.config import Config
from ...core.exceptions import ConflictError
from ...core.logging import bind_context, clear_context, get_logger
from ...core.paths import ProjectPaths
from ...core.types import ServiceResult
from ...models.activity import ActivityRequest
from ...models.report import ReportKind, ScaffoldReport
from ...models.resources import InsertPosition
from ...storage import StorageBackend
from ..merge import ActivityKind, ManifestRegistrar, ResourceMergePlanner, get_kind
from ..templating import TemplateRenderer

logger = get_logger(__name__)


class ScaffoldService:
    """Generates an activity and merges its resources into a project."""

    def __init__(
        self,
        storage: StorageBackend,
        config: Config | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        """Initialize the scaffold service."""
        self.storage = storage
        self.config = config or Config()
        self.renderer = renderer or TemplateRenderer()
        self.paths = ProjectPaths(self.config.layout)
        self.planner = ResourceMergePlanner(storage, self.renderer, self.paths)
        self.registrar = ManifestRegistrar(storage, self.paths)

    def check_conflicts(self, request: ActivityRequest) -> ServiceResult[list[str]]:
        """Make sure neither the class file nor the layout file exists.

        Returns:
            ServiceResult with the paths to create, or failed with one error
            line per existing path
        """
        targets = [self.paths.activity_class(request), self.paths.layout_file(request)]
        existing = [path for path in targets if self.storage.exists(path)]
        if existing:
            conflict = ConflictError(
                message="refusing to overwrite, nothing was written",
                path=", ".join(existing),
            )
            return ServiceResult.fail(str(conflict), errors=existing)
        return ServiceResult.ok(targets)

    def manifest_position(self, kind: ActivityKind) -> InsertPosition:
        return self.config.manifest_position or kind.manifest_position

    def create_directories(self, request: ActivityRequest, kind: ActivityKind) -> list[str]:
        """Create the directories the generated files go into.

        Returns:
            Directories that did not exist before
        """
        directories = [self.paths.package_dir(request.activity_package), self.paths.layout_dir]
        for value_file in kind.value_files:
            values_dir = self.paths.values_dir(value_file.qualifier)
            if values_dir not in directories:
                directories.append(values_dir)
        return [directory for directory in directories if self.storage.ensure_dir(directory)]

    def generate_sources(
        self,
        request: ActivityRequest,
        kind: ActivityKind,
        app_package: str,
    ) -> list[str]:
        """Render the class and layout files.

        Returns:
            Paths of the files written, class first
        """
        context = self.renderer.context_for(request, app_package)
        rendered = [
            (self.paths.activity_class(request), self.renderer.render(kind.class_template, context)),
            (self.paths.layout_file(request), self.renderer.render(kind.layout_template, context)),
        ]
        # all rendering happens before the first write
        for path, content in rendered:
            self.storage.store_text(path, content)
        return [path for path, _ in rendered]

    def run(self, request: ActivityRequest, app_package: str) -> ScaffoldReport:
        """Run the whole write phase.

        Args:
            request: Activity to scaffold
            app_package: Package holding the app's R class

        Returns:
            ScaffoldReport listing created and updated paths in order, or the
            conflicting paths when nothing was written

        Raises:
            MissingResourceError: If the manifest or an ensured file is missing.
            TagNotFoundError: If a file lacks the tag entries are inserted into.
            TemplateRenderError: If a template cannot be rendered.
            StructuralError: If a project file is not valid UTF-8 text.
            StorageError: If a project file cannot be read or written.
        """
        report = ScaffoldReport()
        kind = get_kind(request.activity_type)
        bind_context(activity=request.qualified_name, activity_type=request.activity_type.value)

        try:
            conflicts = self.check_conflicts(request)
            if not conflicts.success:
                for path in conflicts.errors:
                    report.add(ReportKind.ERROR, path)
                report.success = False
                logger.warning("Scaffold aborted", reason=conflicts.error)
                return report

            manifest_text = self.registrar.check()

            created_dirs = self.create_directories(request, kind)
            logger.debug("Directories ready", created=created_dirs)

            for path in self.generate_sources(request, kind, app_package):
                report.add(ReportKind.CREATE, path)

            for outcome in self.planner.merge(request):
                if outcome.created:
                    report.add(ReportKind.CREATE, outcome.file)
                if outcome.modified:
                    report.add(ReportKind.UPDATE, outcome.file)

            manifest = self.registrar.register(request, self.manifest_position(kind), manifest_text)
            report.add(ReportKind.UPDATE, manifest.file)
            if manifest.downgraded:
                report.add(
                    ReportKind.WARN,
                    f"{request.activity_name} was not registered as launcher, "
                    "another launcher activity already exists",
                )

            logger.info(
                "Scaffold complete",
                created=len(report.created),
                updated=len(report.updated),
            )
            return report
        finally:
            clear_context()
