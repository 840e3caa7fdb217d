"""Click parameter types for browser kinds."""

from typing import Any

import click

from browserscan.core.kinds import Kind, all_kinds, from_short_name, short_name


def _choices() -> str:
    return ", ".join(short_name(kind) for kind in all_kinds())


class KindType(click.ParamType):
    """A single browser kind given by its short name (e.g. "firefox")."""

    name = "browser"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Kind:
        if isinstance(value, Kind):
            return value
        kind = from_short_name(str(value))
        if kind is None:
            self.fail(f"{value!r} is not one of: {_choices()}", param, ctx)
        return kind


class KindListType(click.ParamType):
    """Comma-separated browser kinds (e.g. "chrome,firefox"), duplicates removed."""

    name = "browsers"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> list[Kind]:
        if isinstance(value, list):
            return value
        kinds: list[Kind] = []
        for part in str(value).split(","):
            if not part.strip():
                continue
            kind = from_short_name(part)
            if kind is None:
                self.fail(f"{part.strip()!r} is not one of: {_choices()}", param, ctx)
            if kind not in kinds:
                kinds.append(kind)
        if not kinds:
            self.fail("at least one browser kind is required", param, ctx)
        return kinds


KIND = KindType()
KIND_LIST = KindListType()
