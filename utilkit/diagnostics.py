"""Readable dumps of exception chains for logs and error pages."""

from __future__ import annotations

import traceback


def _unwrap(exc: BaseException) -> BaseException:
    # A group wrapping a single exception is noise in the report.
    while isinstance(exc, BaseExceptionGroup) and len(exc.exceptions) == 1:
        exc = exc.exceptions[0]
    return exc


def _chain(exc: BaseException) -> list[BaseException]:
    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = _unwrap(exc)
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        nxt = current.__cause__ or (None if current.__suppress_context__ else current.__context__)
        current = _unwrap(nxt) if nxt is not None else None
    return chain


def _type_name(exc: BaseException) -> str:
    cls = type(exc)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _detail(exc: BaseException) -> list[str]:
    lines = [f"[Exception]: ({_type_name(exc)}) {exc}"]
    for note in getattr(exc, "__notes__", ()):
        lines.append(f"[Data]: {note}")
    if exc.__traceback__ is not None:
        lines.append("[StackTrace]:")
        lines.extend(
            line.rstrip("\n") for line in traceback.format_tb(exc.__traceback__)
        )
    return lines


def format_exception_chain(exc: BaseException | None, *, html: bool = False) -> str:
    """Describe *exc* and every exception it was raised from.

    The output starts with a numbered one-line summary of the chain, followed
    by a detail block (type, message, notes, traceback) per exception. With
    ``exc=None`` the current call stack is reported instead.
    """
    if exc is None:
        lines = ["[StackTrace]:"]
        lines.extend(line.rstrip("\n") for line in traceback.format_stack()[:-1])
    else:
        chain = _chain(exc)
        lines = ["[Exceptions]:"]
        for i, item in enumerate(chain, start=1):
            lines.append(f"   #{i}: ({_type_name(item)}) {item}")
        for item in chain:
            lines.append("")
            lines.extend(_detail(item))

    text = "\n".join(lines) + "\n"
    if html:
        text = text.replace("\n", "<br />")
    return text
