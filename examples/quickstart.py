"""Quickstart example for diagnostix.

This example walks through building, composing, and customizing
compiler-style diagnostics.

Note: Colour is forced off so the printed output matches the comments.
Run with FORCE_COLOR=1 and remove the set_color_enabled() call to see
the ANSI styling.
"""

from diagnostix import (
    DiagnosticError,
    create_registry,
    extend_with_message,
    new,
    newf,
    reset,
    set_message_prefix_fragment,
    warning,
)
from diagnostix.decoration import bold_yellow, set_color_enabled
from diagnostix.enums import FragmentName

set_color_enabled(False)

# Example 1: Simple error
print("=" * 50)
print("Example 1: Simple Error")
print("=" * 50)

print(new("test"))
# Output: error: test

print(newf("invalid port %d", 70000).code(22))
# Output: error[E0022]: invalid port 70000

# Example 2: Cause, notes, and helps
print("\n" + "=" * 50)
print("Example 2: Cause, Notes, and Helps")
print("=" * 50)

print(
    new("'Foo' is not an iterator")
    .code(277)
    .causef("src/main.rs:4:16\n\n     for foo in Foo {}\n                ^^^ 'Foo' is not an iterator")
    .note("maybe try calling '.iter()' or a similar method")
    .help("the trait 'std::iter::Iterator' is not implemented for 'Foo'")
)
# Output:
# error[E0277]: 'Foo' is not an iterator
#   --> src/main.rs:4:16
#    |
#    |      for foo in Foo {}
#    |                 ^^^ 'Foo' is not an iterator
#    = note: maybe try calling '.iter()' or a similar method
#    = help: the trait 'std::iter::Iterator' is not implemented for 'Foo'

# Example 3: Layering errors across a call stack
print("\n" + "=" * 50)
print("Example 3: Wrapping")
print("=" * 50)


def call_third_party() -> None:
    """Pretend a library failed; its error becomes our cause."""
    try:
        msg = "something went wrong"
        raise ConnectionError(msg)
    except ConnectionError as exc:
        raise new("failed to execute third party library").cause(exc) from exc


def call_function() -> None:
    """Our own layer wraps the lower-level diagnostic."""
    try:
        call_third_party()
    except DiagnosticError as exc:
        raise (
            new("failed to execute our own function")
            .causef("some additional details about the error")
            .wrap(exc)
            .help("do this to fix the error")
        ) from exc


try:
    call_function()
except DiagnosticError as err:
    print(err)
# Output:
# error: failed to execute our own function
#   --> some additional details about the error
#    = help: do this to fix the error
#
# error: failed to execute third party library
#   --> something went wrong

# Example 4: Did-you-mean suggestions
print("\n" + "=" * 50)
print("Example 4: Suggestions")
print("=" * 50)

print(new("unknown output format 'jsn'").suggest_value("jsn", ["json", "yaml", "toml"]))
# Output:
# error: unknown output format 'jsn'
#    = help: did you mean: 'json'?

print(new("missing output format").suggest_value("", ["yaml", "json", "toml"]))
# Output:
# error: missing output format
#    = help: available values:
#            - json
#            - toml
#            - yaml

# Example 5: Re-contextualizing an error
print("\n" + "=" * 50)
print("Example 5: extend_with_message")
print("=" * 50)

low_level = new("EOF while parsing").causef("config.toml:12:1")
print(extend_with_message(low_level, "could not load configuration"))
# Output:
# error: could not load configuration
#   --> config.toml:12:1

# Example 6: Warnings
print("\n" + "=" * 50)
print("Example 6: Warnings")
print("=" * 50)

deprecated = warning.new("option 'colour' is deprecated").help("use 'color' instead")
print(deprecated)
print(f"is_warning: {warning.is_warning(deprecated)}")
# Output:
# warning: option 'colour' is deprecated
#    = help: use 'color' instead
# is_warning: True

# Example 7: Custom registries and global overrides
print("\n" + "=" * 50)
print("Example 7: Custom Rendering")
print("=" * 50)

lint = create_registry(
    fragments={
        FragmentName.MESSAGE_PREFIX: '{{ bold_yellow("lint[" ~ rule ~ "]") }}',
    },
    additional_functions={"bold_yellow": bold_yellow},
)
print(lint.new_error("line too long").set_extra_data({"rule": "E501"}))
# Output: lint[E501]: line too long

set_message_prefix_fragment('{{ bold_red("ERROR") }}')
print(new("shouting now"))
# Output: ERROR: shouting now

reset()
print(new("back to normal"))
# Output: error: back to normal

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
