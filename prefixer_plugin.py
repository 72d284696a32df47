# prefixer_plugin.py – build hook: pick eligible files, rewrite, report changes

import os
from pathlib import Path
from typing import Dict, Iterable, Optional

from prefixer_base import ParseFailure, error
from prefixer_tsx import prefix_tailwind_classes


def _pattern_fragment(pattern: str) -> str:
    # "**/*.tsx" -> ".tsx", "**/legacy/*" -> "legacy/"; matched as a substring
    return pattern.replace("**/", "", 1).replace("*", "", 1)


class TailwindPrefixer:
    name = "class-renaming"

    def __init__(
        self,
        prefix: str,
        include: Iterable[str] = ("**/*.tsx",),
        exclude: Iterable[str] = (),
        root: Optional[Path] = None,
    ):
        if not prefix:
            raise ValueError("prefix must be a non-empty string")
        self.prefix = prefix
        self.include = [_pattern_fragment(p) for p in include]
        self.exclude = [_pattern_fragment(p) for p in exclude]
        self.root = Path(root) if root is not None else None

    # ------------------------------------------------ file filter
    def should_process(self, file_id: str) -> bool:
        if "node_modules" in file_id:
            return False
        root = self.root if self.root is not None else Path.cwd()
        rel = os.path.relpath(file_id, root)

        is_included = any(frag in rel for frag in self.include)
        is_excluded = any(frag in rel for frag in self.exclude)
        return is_included and not is_excluded and file_id.endswith(".tsx")

    # ------------------------------------------------ hook
    def transform(self, code: str, file_id: str) -> Optional[Dict[str, Optional[str]]]:
        """Rewrite *code*; None means the file is left as it is on disk."""
        if not self.should_process(file_id):
            return None

        try:
            transformed = prefix_tailwind_classes(code, self.prefix)
        except ParseFailure as exc:
            error(f"Parser failed for {file_id}: {exc}")
            raise
        if transformed != code:
            return {"code": transformed, "map": None}
        return None
