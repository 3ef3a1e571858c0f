"""Pipeline orchestration for a pull run."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from .config import PullConfig
from .contributors import ContributorFetcher
from .git.sync import RepositorySync
from .l10n import LocaleAggregator
from .logging import get_logger
from .manifests import ManifestEmitter, read_version_name
from .models import PullResult, UpstreamMeta
from .processor import AddonProcessor

ADDONS_DIR = "addons"
L10N_DIR = "addons-l10n"
LIBRARIES_DIR = "libraries"
GENERATED_DIR = "generated"
L10N_ENTRIES_FILE = "l10n-entries.js"
UPSTREAM_META_FILE = "upstream-meta.json"

OUTPUT_DIRS = (ADDONS_DIR, L10N_DIR, LIBRARIES_DIR, GENERATED_DIR)


class Orchestrator:
    """Runs sync, rewrite, aggregation and manifest generation in order."""

    def __init__(
        self,
        config: PullConfig,
        *,
        sync: RepositorySync | None = None,
        contributor_fetcher: ContributorFetcher | None = None,
        manifest_emitter: ManifestEmitter | None = None,
    ) -> None:
        self.config = config
        self.sync = sync or RepositorySync()
        self.contributor_fetcher = contributor_fetcher or ContributorFetcher()
        self.manifest_emitter = manifest_emitter or ManifestEmitter(
            base_locale=config.l10n.base_locale
        )
        self.logger = get_logger("orchestrator")

    def run(self, *, skip_clone: bool = False) -> PullResult:
        """Pull upstream and regenerate every output under the root directory."""
        root = self.config.root
        upstream = self.config.upstream_path
        self.logger.info("Starting pull into %s", root)

        if skip_clone:
            self.logger.info("Skipping clone; reusing checkout at %s", upstream)
        else:
            self.sync.clone(self.config.upstream.url, self.config.upstream.branch, upstream)

        # Outputs are wiped even if the checkout turns out to be unusable.
        self._reset_outputs(root)

        commit = self.sync.commit_hash(upstream)
        self.logger.info("Upstream at commit %s", commit)

        contributors_thread = None
        if self.config.contributors.enabled:
            contributors_thread = self.contributor_fetcher.start(
                self.config.contributors.url,
                self.config.contributors_path,
                timeout=self.config.contributors.timeout,
            )

        processed = self._process_addons(upstream, root)

        aggregator = LocaleAggregator(self.config.addons)
        languages = aggregator.aggregate(upstream / L10N_DIR, root / L10N_DIR)
        self.logger.info("Aggregated %d locales", len(languages))

        self.manifest_emitter.write_l10n_entries(
            root / GENERATED_DIR / L10N_ENTRIES_FILE, languages
        )
        meta = UpstreamMeta(
            version=read_version_name(upstream / "manifest.json"),
            commit=commit,
            languages=languages,
        )
        self.manifest_emitter.write_upstream_meta(root / UPSTREAM_META_FILE, meta)
        self.logger.info("Pulled %s (%s)", meta.version, meta.commit)

        return PullResult(meta=meta, addons=processed, contributors_thread=contributors_thread)

    def _reset_outputs(self, root: Path) -> None:
        for name in OUTPUT_DIRS:
            path = root / name
            if path.exists():
                shutil.rmtree(path)
            path.mkdir(parents=True)

    def _process_addons(self, upstream: Path, root: Path) -> List[str]:
        processor = AddonProcessor(
            library_source=upstream / LIBRARIES_DIR,
            library_output=root / LIBRARIES_DIR,
        )
        processed: List[str] = []
        for addon in self.config.addons:
            report = processor.process(
                addon,
                upstream / ADDONS_DIR / addon,
                root / ADDONS_DIR / addon,
            )
            self.logger.debug(
                "Processed %s: %d files, %d rewritten",
                addon,
                report.files,
                len(report.rewritten),
            )
            processed.append(addon)
        self.logger.info("Processed %d addons", len(processed))
        return processed


__all__ = ["Orchestrator", "OUTPUT_DIRS"]
