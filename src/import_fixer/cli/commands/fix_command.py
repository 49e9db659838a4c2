import logging
import argparse
from typing import Dict, Any

from import_fixer.cli.adapter_factory import (
    create_error_parser, create_file_system_adapter, create_import_patcher,
    create_module_resolver,
)
from import_fixer.application.services.ui_service import UIService
from import_fixer.application.use_cases.fix_imports import (
    BuildLogNotFoundError, FixImportsUseCase, ModuleResolutionAborted
)
from import_fixer.domain.models.broken_reference import FixImportsReport
from import_fixer.domain.ports.ui_service import LogLevel
from import_fixer.infrastructure.factories.ui_service_factory import create_ui_service
from import_fixer.infrastructure.adapters.resolution.mapping_module_resolver import ModuleMappingError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_PATCH_FAILURES = 3


def handle_fix(args: argparse.Namespace, config: Dict[str, Any]) -> int:
    """
    Handles the fix command logic.

    Returns:
        The process exit code.
    """
    ui = UIService(create_ui_service(config))
    build_file = config['build_log']['build_file']
    dry_run = config['patching']['dry_run']

    ui.panel(f"Fixing missing imports from {build_file}" + (" (dry run)" if dry_run else ""),
             "Import Fixer")

    try:
        file_system = create_file_system_adapter()
        use_case = FixImportsUseCase(
            error_parser=create_error_parser(config),
            file_system=file_system,
            resolver=create_module_resolver(ui, getattr(args, 'modules', None)),
            patcher=create_import_patcher(config, file_system),
            ui=ui,
        )
        report = use_case.execute(build_file)
    except BuildLogNotFoundError as e:
        ui.log(str(e), LogLevel.ERROR)
        logger.error(str(e))
        return EXIT_ERROR
    except ModuleMappingError as e:
        ui.log(str(e), LogLevel.ERROR)
        logger.error(str(e))
        return EXIT_ERROR
    except ModuleResolutionAborted as e:
        _render_summary(ui, e.report)
        ui.log(f"{e}. Stopping.", LogLevel.ERROR)
        logger.error(str(e))
        return EXIT_ERROR
    except Exception as e:
        ui.log(f"An error occurred while fixing imports: {e}", LogLevel.ERROR)
        logger.critical(f"An error occurred while fixing imports: {e}", exc_info=True)
        return EXIT_ERROR

    _render_summary(ui, report)
    if report.has_failures:
        ui.log("Some files could not be updated.", LogLevel.ERROR)
        return EXIT_PATCH_FAILURES
    return EXIT_OK


def _render_summary(ui: UIService, report: FixImportsReport) -> None:
    if not report.results:
        return
    table = ui.table(["Type", "Module", "File", "Outcome"], title="Summary")
    for type_name, results in sorted(report.results.items()):
        for result in results:
            table.add_row(type_name, result.module, result.file_path, result.status.value)
    table.render()
