"""Output formatting for transform runs."""
from __future__ import annotations

import json

from globimport.transform import TransformResult


class Reporter:
    """Summarizes per-file transform results."""

    def __init__(self, results: list[TransformResult]):
        self.results = results

    @property
    def failed(self) -> list[TransformResult]:
        return [r for r in self.results if not r.ok]

    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def format_json(self) -> str:
        return json.dumps(
            {
                "files": [r.to_dict() for r in self.results],
                "failed": len(self.failed),
            },
            indent=2,
        )

    def format_text(self) -> str:
        lines = []
        for result in self.results:
            if result.ok:
                if result.expanded:
                    lines.append(
                        f"  OK  {result.file_name}: {result.expanded} wildcard import(s), "
                        f"{result.generated_imports} generated"
                    )
                else:
                    lines.append(f"  --  {result.file_name}: no wildcard imports")
            else:
                lines.append(f"  !!  {result.file_name}: {result.error}")

        total = sum(r.expanded for r in self.results)
        lines.append("")
        lines.append(
            f"{len(self.results)} file(s), {total} wildcard import(s) expanded, "
            f"{len(self.failed)} failed."
        )
        return "\n".join(lines)
