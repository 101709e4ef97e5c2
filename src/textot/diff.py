from typing import List

import structlog
from diff_match_patch import diff_match_patch

from textot.models import Delete, Insert, Retain, TextEdit

logger = structlog.get_logger(__name__)


def edit_from_text(original_text: str, modified_text: str, semantic: bool = True) -> TextEdit:
    """
    Computes a TextEdit that turns `original_text` into `modified_text`.

    Useful when a client only sees snapshots of its buffer and has to
    produce an edit before sending it for transformation.
    The result always satisfies apply_edit(edit, original_text) == modified_text.
    """
    dmp = diff_match_patch()

    # 1. Character-level diff
    diffs = dmp.diff_main(original_text, modified_text, False)

    # 2. Optional semantic cleanup (groups small equalities into replace blocks)
    if semantic:
        dmp.diff_cleanupSemantic(diffs)

    # 3. Feed the diff through the builder
    edit = TextEdit()
    for op, text in diffs:
        if op == dmp.DIFF_EQUAL:
            edit.retain(len(text))
        elif op == dmp.DIFF_DELETE:
            edit.delete(len(text))
        elif op == dmp.DIFF_INSERT:
            edit.insert(text)

    logger.debug(f"Built edit from {len(diffs)} diff chunks: {describe_edit(edit)}")
    return edit


def describe_edit(edit: TextEdit) -> List[str]:
    """
    One human-readable line per primitive, e.g. ["retain 5", "insert 'abc'", "delete 2"].
    """
    lines = []
    for op in edit:
        match op:
            case Retain(count=count):
                lines.append(f"retain {count}")
            case Delete(count=count):
                lines.append(f"delete {count}")
            case Insert(text=text):
                lines.append(f"insert {text!r}")
    return lines
