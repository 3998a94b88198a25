"""
Resource Merge Service.

Makes sure the shared value files an activity depends on exist and contain the
entries it needs, without ever overwriting a file or duplicating an entry.

For each obligation, in catalog order:

1. ensure-file: copy the stock template if the file is absent;
2. probe: read the file and test each entry's probe by substring containment;
3. insert: add the fragment of every failing probe inside <resources>;
4. write the file once if anything was inserted.

Running the planner twice with the same request leaves the files unchanged the
second time, because every probe is then satisfied.
"""

from __future__ import annotations

from ...core.exceptions import MissingResourceError
from ...core.logging import get_logger
from ...core.paths import ProjectPaths
from ...models.activity import ActivityRequest
from ...models.resources import InsertPosition, MergeOutcome, ResourceObligation
from ...naming import contains
from ...storage import StorageBackend
from ..templating import TemplateRenderer
from .catalog import get_kind
from .inserter import insert_into_tag

logger = get_logger(__name__)


class ResourceMergePlanner:
    """Applies resource obligations to a project."""

    def __init__(
        self,
        storage: StorageBackend,
        renderer: TemplateRenderer,
        paths: ProjectPaths | None = None,
    ) -> None:
        self.storage = storage
        self.renderer = renderer
        self.paths = paths or ProjectPaths()

    def plan(self, request: ActivityRequest) -> list[ResourceObligation]:
        """Compute the obligations of a request, in the order they are applied."""
        return get_kind(request.activity_type).obligations(request, self.paths)

    def ensure_file(self, obligation: ResourceObligation) -> bool:
        """Copy the stock template into place unless the file already exists.

        Returns:
            True if the file was created.
        """
        if self.storage.exists(obligation.target_file):
            return False
        self.storage.store_text(obligation.target_file, self.renderer.stock(obligation.stock_template))
        logger.debug("Created resource file from stock", file=obligation.target_file)
        return True

    def apply(self, obligation: ResourceObligation) -> MergeOutcome:
        """Ensure, probe and insert for a single obligation.

        Raises:
            MissingResourceError: If the file cannot be read after the ensure step.
            TagNotFoundError: If the file has no <resources> element to insert into.
        """
        created = self.ensure_file(obligation)

        try:
            text = self.storage.load_text(obligation.target_file)
        except FileNotFoundError as e:
            raise MissingResourceError(
                message="resource file is not readable after being ensured",
                path=obligation.target_file,
                cause=e,
            ) from e

        inserted: list[str] = []
        for entry in obligation.entries:
            if contains(text, entry.probe):
                continue
            text = insert_into_tag(
                text,
                obligation.enclosing_tag,
                entry.fragment,
                InsertPosition.BEFORE_CLOSE,
                path=obligation.target_file,
            )
            inserted.append(entry.probe)

        if inserted:
            self.storage.store_text(obligation.target_file, text)
            logger.info("Merged resource entries", file=obligation.target_file, inserted=inserted)

        return MergeOutcome(
            file=obligation.target_file,
            created=created,
            modified=bool(inserted),
            inserted=inserted,
        )

    def merge(self, request: ActivityRequest) -> list[MergeOutcome]:
        """Apply every obligation of a request.

        Returns:
            One outcome per resource file, in catalog order
        """
        return [self.apply(obligation) for obligation in self.plan(request)]
