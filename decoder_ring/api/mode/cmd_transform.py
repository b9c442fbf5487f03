"""Transform command."""

from collections.abc import Iterator

from ..Direction import Direction
from ..StageResult import StageResult
from ..transform.TransformError import TransformError
from .._output_schemas.mode import ModeTransformOutput
from ._MODES import MODES
from .lookup import lookup

# Modes whose output already ends in a controlled way; never add a newline
_SELF_TERMINATED = frozenset({"hex-extended"})


def _not_found_message(mode: str, direction: Direction) -> str:
    if mode in MODES:
        return f"Mode {mode!r} does not support {direction.value}"
    return f"Mode {mode!r} not found"


def cmd_transform(
    mode: str,
    direction: Direction,
    data: bytes,
    strip_newline: bool = True,
    emit_newline: bool = True,
) -> StageResult:
    """Run one transform over a complete input buffer.

    Args:
        mode: Mode name or IANA character-set name
        direction: Decode or encode
        data: Entire input
        strip_newline: Drop one trailing newline from data first
        emit_newline: Append a newline to the result (ignored for hex-extended)

    Returns:
        StageResult with ModeTransformOutput output; data is empty on failure
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.1, "Resolving mode...")
        transform = lookup(mode, direction)
        if transform is None:
            message = _not_found_message(mode, direction)
            yield (1.0, "Failed")
            result_obj.result = message
            result_obj.output = ModeTransformOutput(
                errors=[message],
                warnings=[],
                mode=mode,
                direction=direction.value,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        src = data
        if strip_newline and src.endswith(b"\n"):
            src = src[:-1]

        yield (0.5, f"Transforming {len(src)} bytes...")
        try:
            out = transform(src)
        except TransformError as e:
            yield (1.0, "Failed")
            result_obj.result = str(e)
            result_obj.output = ModeTransformOutput(
                errors=[str(e)],
                warnings=[],
                mode=mode,
                direction=direction.value,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        if emit_newline and mode not in _SELF_TERMINATED:
            out += b"\n"

        yield (1.0, "Complete")
        result_obj.result = f"Transformed {len(src)} bytes into {len(out)} bytes"
        result_obj.output = ModeTransformOutput(
            errors=[],
            warnings=[],
            mode=mode,
            direction=direction.value,
            data=out,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Running {mode} {direction.value}...",
        progress_callback=do_work,
    )
