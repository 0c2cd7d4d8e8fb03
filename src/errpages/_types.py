"""Shared type definitions for errpages."""

from collections.abc import Callable

# Template name (unique key in the registry, also the output sub-directory)
type TemplateName = str

# HTTP status code as a string key (e.g. "404")
type Code = str

# Callback invoked once per rendered page
type VisitFunc = Callable[[TemplateName, Code, bytes], None]
