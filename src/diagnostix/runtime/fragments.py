"""Built-in render fragments.

Each fragment is a Jinja2 template rendering one structural part of a
diagnostic. Fragments see the render context (message, code, cause, notes,
helps, wrapped, plus any extra data) and the registry's formatter functions
as globals.

Whitespace is significant. Every newline in the output is emitted
explicitly through a string expression, and template source newlines are
trimmed with the ``{%- -%}`` markers.

Layout produced by the defaults:

    error[E0123]: <message>
      --> <cause line 1>
       | <cause line 2...>
       = note: <note line 1>
               <note line 2...>
       = help: <help line 1>
               <help line 2...>

Python 3.13+.
"""

from types import MappingProxyType

from diagnostix.enums import FragmentName

__all__ = [
    "CAUSE_FRAGMENT",
    "DEFAULT_FRAGMENTS",
    "HELPS_FRAGMENT",
    "MESSAGE_PREFIX_FRAGMENT",
    "NOTES_FRAGMENT",
    "ROOT_TEMPLATE",
]

MESSAGE_PREFIX_FRAGMENT = """\
{%- if code -%}
{{ bold_red("error[" ~ code ~ "]") }}
{%- else -%}
{{ bold_red("error") }}
{%- endif -%}
"""

CAUSE_FRAGMENT = r"""
{%- if cause is not none -%}
{%- set lines = split(cause, "\n") -%}
{{ "\n  " ~ bold_blue("--> ") ~ lines[0] }}
{%- for line in lines[1:] -%}
{{ "\n   " ~ bold_blue("| ") ~ line }}
{%- endfor -%}
{%- endif -%}
"""

NOTES_FRAGMENT = r"""
{%- for note in notes -%}
{%- set lines = split(note, "\n") -%}
{{ "\n   " ~ bold_blue("= ") ~ bold("note") ~ ": " ~ lines[0] }}
{%- for line in lines[1:] -%}
{{ "\n           " ~ line }}
{%- endfor -%}
{%- endfor -%}
"""

HELPS_FRAGMENT = r"""
{%- for help in helps -%}
{%- set lines = split(help, "\n") -%}
{{ "\n   " ~ bold_blue("= ") ~ bold_green("help") ~ ": " ~ lines[0] }}
{%- for line in lines[1:] -%}
{{ "\n           " ~ line }}
{%- endfor -%}
{%- endfor -%}
"""

# Fixed skeleton; not overridable. Wrapped errors are appended by the
# renderer so each one renders with its own registry.
ROOT_TEMPLATE = """\
{%- include "message-prefix" -%}
{{- bold(": " ~ message) -}}
{%- include "cause" -%}
{%- include "notes" -%}
{%- include "helps" -%}
"""

DEFAULT_FRAGMENTS: MappingProxyType[str, str] = MappingProxyType(
    {
        FragmentName.MESSAGE_PREFIX: MESSAGE_PREFIX_FRAGMENT,
        FragmentName.CAUSE: CAUSE_FRAGMENT,
        FragmentName.NOTES: NOTES_FRAGMENT,
        FragmentName.HELPS: HELPS_FRAGMENT,
    }
)
