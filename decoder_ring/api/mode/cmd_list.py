"""List available modes command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .._output_schemas.mode import ModeListOutput
from .enumerate_modes import enumerate_modes


def cmd_list() -> StageResult:
    """List all registered modes."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading registry...")
        modes = enumerate_modes()

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(modes)} mode(s)"
        result_obj.output = ModeListOutput(
            errors=[],
            warnings=[],
            modes=modes,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing modes...",
        progress_callback=do_work,
    )
