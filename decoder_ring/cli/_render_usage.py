"""Render the usage text shown for bad invocations."""

from jinja2 import BaseLoader, Environment, StrictUndefined

from ..api.mode.cmd_list import cmd_list
from ..utils.get_package_version import get_package_version

USAGE_TEMPLATE = """Usage of {{ prog }} {{ version }}:

    {{ prog }} [-encode|-e] [-strip|-s] [-emit|-t] <MODE>

MODE choices are {{ modes | join(", ") }}, or an IANA encoding name. Modes marked with * are encode only.

As a convenience feature, when this executable is installed or symlinked as 'encoder-ring', -e defaults to true.

Options:
  -e, -encode, --encode / -d, --decode
                                 encode rather than decode (default: {{ "encode" if default_encode else "decode" }})
  -s, -strip, --strip / -S, --no-strip
                                 strip one trailing newline from input (default: {{ "on" if strip_newline else "off" }})
  -t, -emit, --emit / -T, --no-emit
                                 emit trailing newline (default: {{ "on" if emit_newline else "off" }})
      --version                  show version and exit
  -h, --help                     show help and exit

Boolean flags also take a value: -strip=false, -emit=0, -e=true.
"""

_ENV = Environment(loader=BaseLoader(), trim_blocks=True, lstrip_blocks=True, undefined=StrictUndefined)


def _render_usage(prog: str, default_encode: bool, strip_newline: bool = True, emit_newline: bool = True) -> str:
    result = cmd_list()
    list(result.progress_callback(result))
    return _ENV.from_string(USAGE_TEMPLATE).render(
        prog=prog,
        version=get_package_version(),
        modes=result.output["modes"],
        default_encode=default_encode,
        strip_newline=strip_newline,
        emit_newline=emit_newline,
    )
