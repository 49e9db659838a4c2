import logging
from typing import Optional

from import_fixer.application.services.import_patcher import ImportPatcher
from import_fixer.application.services.reference_aggregator import ReferenceAggregator
from import_fixer.domain.models.broken_reference import FixImportsReport, PatchResult, PatchStatus
from import_fixer.domain.ports.error_parser import ErrorParserPort
from import_fixer.domain.ports.file_system import FileSystemPort
from import_fixer.domain.ports.module_resolver import ModuleResolverPort
from import_fixer.domain.ports.ui_service import LogLevel, UIServicePort

logger = logging.getLogger(__name__)

_RESULT_LEVELS = {
    PatchStatus.PATCHED: LogLevel.SUCCESS,
    PatchStatus.WOULD_PATCH: LogLevel.SUCCESS,
    PatchStatus.ALREADY_PRESENT: LogLevel.INFO,
    PatchStatus.NO_ANCHOR: LogLevel.WARNING,
    PatchStatus.UNWRITABLE: LogLevel.WARNING,
    PatchStatus.ENCODE_FAILED: LogLevel.WARNING,
    PatchStatus.FAILED: LogLevel.ERROR,
}


class BuildLogNotFoundError(Exception):
    """Raised when the build log does not exist or cannot be read."""

    def __init__(self, build_file: str):
        super().__init__(f"File doesn't exist at {build_file}")
        self.build_file = build_file


class ModuleResolutionAborted(Exception):
    """Raised when input ends before a missing type was given a module."""

    def __init__(self, type_name: str, report: FixImportsReport):
        super().__init__(f"Input ended before a module was given for {type_name}")
        self.type_name = type_name
        self.report = report


class FixImportsUseCase:
    """
    Scans a build log for missing types, asks for the module of each one and
    adds the import to every file that reported it.
    """

    def __init__(
        self,
        error_parser: ErrorParserPort,
        file_system: FileSystemPort,
        resolver: ModuleResolverPort,
        patcher: ImportPatcher,
        ui: UIServicePort,
        aggregator: Optional[ReferenceAggregator] = None,
    ):
        self.error_parser = error_parser
        self.fs = file_system
        self.resolver = resolver
        self.patcher = patcher
        self.ui = ui
        self.aggregator = aggregator or ReferenceAggregator()

    def execute(self, build_file: str) -> FixImportsReport:
        """
        Runs the whole pipeline against one build log.

        Args:
            build_file: Path of the compiler output to scan.

        Returns:
            The grouped references, the module chosen for each type and the
            outcome for every file.

        Raises:
            BuildLogNotFoundError: The build log is missing or unreadable.
            ModuleResolutionAborted: Input ended while asking for a module.
                Files patched before that point stay patched.
        """
        if not self.fs.is_readable_file(build_file):
            raise BuildLogNotFoundError(build_file)

        logger.info(f"Scanning build log {build_file}")
        status = self.ui.status("Searching build log for broken references...")
        try:
            index = self.aggregator.aggregate(self.error_parser.scan(self.fs.iter_lines(build_file)))
        finally:
            status.stop()

        report = FixImportsReport(index=index)
        if not index:
            self.ui.log("No 'cannot find in scope' errors found in the build log.", LogLevel.SUCCESS)
            return report

        self.ui.log(f"Found {len(index)} types that are not found: {', '.join(index.types())}")

        for type_name in index.types():
            paths = index.paths_for(type_name)
            module = self.resolver.resolve(type_name, paths)
            if module is None:
                raise ModuleResolutionAborted(type_name, report)

            report.modules[type_name] = module
            results = self.patcher.patch_files(paths, module)
            report.results[type_name] = results
            for result in results:
                self._show(result)

        return report

    def _show(self, result: PatchResult) -> None:
        self.ui.log(result.message, _RESULT_LEVELS.get(result.status, LogLevel.INFO))
