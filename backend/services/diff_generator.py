"""
Diff Generator Service - Build line and word diff models from two texts
"""

from __future__ import annotations

import re
from difflib import SequenceMatcher

from models.diff import ChangeType, DiffPaneModel, DiffPiece, SideBySideDiffModel

_WORD_PATTERN = re.compile(r"\w+|\s+|[^\w\s]")


class DiffGenerator:
    """Generate side-by-side and inline diff models"""

    def __init__(self, ignore_whitespace: bool = False, ignore_case: bool = False):
        self.ignore_whitespace = ignore_whitespace
        self.ignore_case = ignore_case

    def build_side_by_side(self, old_text: str, new_text: str) -> SideBySideDiffModel:
        """Build paired rows, None marking the side a line is missing from"""
        old_lines = self._split_lines(old_text)
        new_lines = self._split_lines(new_text)

        old_pieces: list[DiffPiece | None] = []
        new_pieces: list[DiffPiece | None] = []
        has_differences = False

        for tag, i1, i2, j1, j2 in self._line_opcodes(old_lines, new_lines):
            if tag == "equal":
                for i, j in zip(range(i1, i2), range(j1, j2)):
                    old_pieces.append(self._line_piece(ChangeType.UNCHANGED, old_lines[i], i))
                    new_pieces.append(self._line_piece(ChangeType.UNCHANGED, new_lines[j], j))
                continue

            has_differences = True
            old_count = i2 - i1
            new_count = j2 - j1
            for k in range(max(old_count, new_count)):
                i = i1 + k
                j = j1 + k
                if k < old_count and k < new_count:
                    old_sub, new_sub = self._word_pieces(old_lines[i], new_lines[j])
                    old_pieces.append(
                        self._line_piece(ChangeType.MODIFIED, old_lines[i], i, old_sub)
                    )
                    new_pieces.append(
                        self._line_piece(ChangeType.MODIFIED, new_lines[j], j, new_sub)
                    )
                elif k < old_count:
                    old_pieces.append(self._line_piece(ChangeType.DELETED, old_lines[i], i))
                    new_pieces.append(None)
                else:
                    old_pieces.append(None)
                    new_pieces.append(self._line_piece(ChangeType.INSERTED, new_lines[j], j))

        return SideBySideDiffModel(
            old_lines=old_pieces,
            new_lines=new_pieces,
            has_differences=has_differences,
        )

    def build_inline(self, old_text: str, new_text: str) -> DiffPaneModel:
        """Build interleaved rows: deletions first, then insertions"""
        old_lines = self._split_lines(old_text)
        new_lines = self._split_lines(new_text)

        lines: list[DiffPiece] = []
        has_differences = False

        for tag, i1, i2, j1, j2 in self._line_opcodes(old_lines, new_lines):
            if tag == "equal":
                for j in range(j1, j2):
                    lines.append(self._line_piece(ChangeType.UNCHANGED, new_lines[j], j))
                continue

            has_differences = True
            paired = min(i2 - i1, j2 - j1)
            inserted_subs: list[list[DiffPiece]] = []
            for k, i in enumerate(range(i1, i2)):
                old_sub: list[DiffPiece] = []
                if k < paired:
                    old_sub, new_sub = self._word_pieces(
                        old_lines[i],
                        new_lines[j1 + k],
                        replaced_old=ChangeType.DELETED,
                        replaced_new=ChangeType.INSERTED,
                    )
                    inserted_subs.append(new_sub)
                lines.append(self._line_piece(ChangeType.DELETED, old_lines[i], None, old_sub))

            for k, j in enumerate(range(j1, j2)):
                sub = inserted_subs[k] if k < paired else []
                lines.append(self._line_piece(ChangeType.INSERTED, new_lines[j], j, sub))

        return DiffPaneModel(lines=lines, has_differences=has_differences)

    def _split_lines(self, text: str) -> list[str]:
        return text.splitlines() if text else []

    def _normalize(self, text: str) -> str:
        """Comparison key honoring the whitespace and case options"""
        if self.ignore_whitespace:
            text = " ".join(text.split())
        if self.ignore_case:
            text = text.lower()
        return text

    def _line_opcodes(
        self,
        old_lines: list[str],
        new_lines: list[str],
    ) -> list[tuple[str, int, int, int, int]]:
        matcher = SequenceMatcher(
            None,
            [self._normalize(line) for line in old_lines],
            [self._normalize(line) for line in new_lines],
            autojunk=False,
        )
        return matcher.get_opcodes()

    def _line_piece(
        self,
        change: ChangeType,
        text: str,
        index: int | None,
        sub_pieces: list[DiffPiece] | None = None,
    ) -> DiffPiece:
        return DiffPiece(
            type=change,
            text=text,
            position=index + 1 if index is not None else None,  # 1-indexed for display
            sub_pieces=sub_pieces if sub_pieces is not None else [],
        )

    def _word_pieces(
        self,
        old_line: str,
        new_line: str,
        replaced_old: ChangeType = ChangeType.MODIFIED,
        replaced_new: ChangeType = ChangeType.MODIFIED,
    ) -> tuple[list[DiffPiece], list[DiffPiece]]:
        """Word-level pieces of a pair of changed lines"""
        old_words = _WORD_PATTERN.findall(old_line)
        new_words = _WORD_PATTERN.findall(new_line)
        matcher = SequenceMatcher(
            None,
            [self._normalize(word) or " " for word in old_words],
            [self._normalize(word) or " " for word in new_words],
            autojunk=False,
        )

        old_pieces: list[DiffPiece] = []
        new_pieces: list[DiffPiece] = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                old_change = new_change = ChangeType.UNCHANGED
            elif tag == "replace":
                old_change, new_change = replaced_old, replaced_new
            else:
                old_change, new_change = ChangeType.DELETED, ChangeType.INSERTED

            for i in range(i1, i2):
                old_pieces.append(DiffPiece(type=old_change, text=old_words[i], position=i + 1))
            for j in range(j1, j2):
                new_pieces.append(DiffPiece(type=new_change, text=new_words[j], position=j + 1))

        return old_pieces, new_pieces
