"""Option patches — literal or computed option mappings."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from fetch_decorators._types import Options, OptionsFactory
from fetch_decorators.exceptions import InvalidPatchError


@dataclass(frozen=True)
class LiteralPatch:
    """Fixed mapping injected as-is on every call."""

    values: Options

    async def resolve(self, opts: Options) -> Options:
        return self.values


@dataclass(frozen=True)
class ComputedPatch:
    """Mapping produced per call by a sync or async function of the current options."""

    compute: OptionsFactory

    async def resolve(self, opts: Options) -> Options:
        result = self.compute(opts)
        if inspect.isawaitable(result):
            result = await result
        if not isinstance(result, Mapping):
            raise InvalidPatchError(
                f"Option patch function returned {type(result).__name__}, expected a mapping"
            )
        return result


OptionsPatch = LiteralPatch | ComputedPatch


def as_patch(patch: Any) -> OptionsPatch:
    """Classify ``patch`` into a LiteralPatch or ComputedPatch."""
    if isinstance(patch, (LiteralPatch, ComputedPatch)):
        return patch
    if isinstance(patch, Mapping):
        return LiteralPatch(patch)
    if callable(patch):
        return ComputedPatch(patch)
    raise InvalidPatchError(
        f"Option patch must be a mapping or a callable, got {type(patch).__name__}"
    )


async def resolve_value(value: Any) -> Any:
    """Call ``value`` with no arguments if callable, awaiting the result when needed."""
    if not callable(value):
        return value
    result = value()
    if inspect.isawaitable(result):
        result = await result
    return result


def single_option_patch(key: str, value: Any) -> ComputedPatch:
    """Patch setting one key, its value computed fresh on every call."""

    async def compute(_opts: Options) -> Options:
        return {key: await resolve_value(value)}

    return ComputedPatch(compute)
