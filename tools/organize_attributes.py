#!/usr/bin/env python3
"""
Reorder element attributes in HTML / Vue / Angular templates.

Every tag in the parsed document (document order, depth-first) has its
attribute list passed through organize.organize() keyed by attribute name.
Only the attribute run of each reordered tag is spliced back into the source
text, so names keep their case and the rest of the file is left as written.

Files are rewritten in place under --root; the original is kept once as
<file>.organize_attributes.bak (skip with --no-backup).
"""
from __future__ import annotations

import argparse
import locale
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from organize import OrganizeError, Presets, normalize_sort, organize, resolve
from presets import DEFAULT_GROUPS_BY_PARSER, PRESETS, default_groups


SORT_CHOICES = ("ASC", "DESC", "NONE")
BACKUP_SUFFIX = ".organize_attributes.bak"

TAG_NAME_RE = re.compile(r"<[^\s/>]+")
# one attribute with its leading whitespace
ATTR_RE = re.compile(r"""(\s+)([^\s"'>/=]+)(?:\s*=\s*(?:"[^"]*"|'[^']*'|(?!['"])[^\s>]*))?""")


@dataclass
class OrganizeOptions:
    groups: List[str] = field(default_factory=list)
    sort: str = "NONE"
    ignore_case: bool = True
    ignore_chars: Optional[str] = None
    parser: Optional[str] = None
    glob: str = "**/*.html"

    def validate(self) -> None:
        if self.sort not in SORT_CHOICES:
            raise ValueError(f"sort must be one of {', '.join(SORT_CHOICES)} (got {self.sort!r})")
        if self.parser is not None and self.parser not in DEFAULT_GROUPS_BY_PARSER:
            raise ValueError(f"parser must be one of {', '.join(DEFAULT_GROUPS_BY_PARSER)} (got {self.parser!r})")
        if not self.glob:
            raise ValueError("glob must not be empty")

    @property
    def sort_mode(self):
        # NONE is the config-surface spelling of "sort disabled"
        return False if self.sort == "NONE" else self.sort

    def groups_for(self, parser: Optional[str]) -> List[str]:
        return list(self.groups) or default_groups(parser)


def _env_bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _split_groups(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    return [g.strip() for g in raw.split(",") if g.strip()]


def resolve_options(args: argparse.Namespace, env: Optional[Mapping[str, str]] = None) -> OrganizeOptions:
    """CLI > env > defaults."""
    env = os.environ if env is None else env
    groups = list(args.group or []) or _split_groups(env.get("ATTRIBUTE_GROUPS"))
    sort = (args.sort or env.get("ATTRIBUTE_SORT") or "NONE").strip().upper()
    ignore_case = False if args.case_sensitive else _env_bool(env, "ATTRIBUTE_IGNORE_CASE", True)
    ignore_chars = args.ignore_chars if args.ignore_chars is not None else (env.get("ATTRIBUTE_IGNORE_CHARS") or None)
    parser = (args.parser or env.get("ATTRIBUTE_PARSER") or "").strip().lower() or None
    glob = args.glob or env.get("ATTRIBUTE_GLOB") or "**/*.html"
    return OrganizeOptions(
        groups=groups,
        sort=sort,
        ignore_case=ignore_case,
        ignore_chars=ignore_chars,
        parser=parser,
        glob=glob,
    )


def parser_for_path(path: Path) -> str:
    name = path.name.lower()
    if name.endswith(".vue"):
        return "vue"
    if name.endswith(".component.html"):
        return "angular"
    return "html"


def organize_tag_attrs(
    tag: Tag,
    groups: List[str],
    sort=False,
    ignore_case: bool = True,
    ignore_chars: Optional[str] = None,
    presets: Optional[Presets] = None,
) -> bool:
    """Reorder one tag's attributes in place. Returns True when the order changed."""
    if not tag.attrs:
        return False
    items = list(tag.attrs.items())
    result = organize(
        items,
        groups,
        presets=PRESETS if presets is None else presets,
        sort=sort,
        ignore_case=ignore_case,
        ignore_chars=ignore_chars,
        key=lambda item: item[0],
    )
    if [name for name, _ in result.flat] == [name for name, _ in items]:
        return False
    tag.attrs = dict(result.flat)
    return True


def organize_tree(
    root: Tag,
    groups: List[str],
    sort=False,
    ignore_case: bool = True,
    ignore_chars: Optional[str] = None,
    presets: Optional[Presets] = None,
    on_change: Optional[Callable[[Tag, List[str]], None]] = None,
) -> int:
    """Walk root and all descendant tags; returns the number of tags rewritten.

    on_change(tag, previous_names) is called for every tag whose order changed.
    """
    presets = PRESETS if presets is None else presets
    # fail on bad groups/sort before touching any tag
    normalize_sort(sort)
    resolve(groups, presets, ignore_case)

    changed = 0
    for tag in [root, *root.find_all(True)]:
        before = list(tag.attrs)
        if organize_tag_attrs(tag, groups, sort, ignore_case, ignore_chars, presets):
            changed += 1
            if on_change is not None:
                on_change(tag, before)
    return changed


def source_attr_spans(text: str, start: int) -> List[Tuple[str, int, int]]:
    """(name, start, end) of every attribute of the opening tag at text[start]."""
    m = TAG_NAME_RE.match(text, start)
    if not m:
        return []
    spans = []
    pos = m.end()
    while True:
        a = ATTR_RE.match(text, pos)
        if not a:
            break
        spans.append((a.group(2), a.start(2), a.end()))
        pos = a.end()
    return spans


def reorder_source_attrs(text: str, start: int, before: List[str], after: List[str]) -> Optional[Tuple[int, int, str]]:
    """Build the replacement for the attribute run of the tag at text[start].

    Attribute chunks keep their source text (name case, quoting, values) and
    the whitespace between positions stays where it was. Returns None when the
    source attributes do not line up with the parsed ones.
    """
    spans = source_attr_spans(text, start)
    if [name.lower() for name, _, _ in spans] != before:
        return None
    chunks = {name.lower(): text[s:e] for name, s, e in spans}
    seps = [""] + [text[spans[i - 1][2]:spans[i][1]] for i in range(1, len(spans))]
    new = "".join(sep + chunks[name] for sep, name in zip(seps, after))
    return spans[0][1], spans[-1][2], new


def organize_html(text: str, options: OrganizeOptions, parser: Optional[str] = None) -> Tuple[str, int]:
    parser = parser or options.parser or "html"
    soup = BeautifulSoup(text, "html.parser")
    line_starts = [0] + [m.end() for m in re.finditer("\n", text)]
    edits: List[Tuple[int, int, str]] = []

    def splice(tag: Tag, before: List[str]) -> None:
        edit = None
        if tag.sourceline is not None:
            start = line_starts[tag.sourceline - 1] + tag.sourcepos
            if text.startswith("<", start):
                edit = reorder_source_attrs(text, start, before, list(tag.attrs))
        if edit is None:
            print(f"[WARN] <{tag.name}> at line {tag.sourceline}: attributes not found in source, left unchanged")
            return
        edits.append(edit)

    organize_tree(
        soup,
        options.groups_for(parser),
        sort=options.sort_mode,
        ignore_case=options.ignore_case,
        ignore_chars=options.ignore_chars,
        on_change=splice,
    )
    if not edits:
        return text, 0
    out = text
    for s, e, new in sorted(edits, reverse=True):
        out = out[:s] + new + out[e:]
    return out, len(edits)


def find_files(root: Path, pattern: str) -> List[Path]:
    return sorted(p for p in root.glob(pattern) if p.is_file() and not p.name.endswith(BACKUP_SUFFIX))


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Organize HTML attributes into ordered groups (optionally sorted within each group)")
    ap.add_argument("--root", required=True, help="Directory containing the templates to rewrite")
    ap.add_argument("--glob", help="File pattern under --root (fallback: env ATTRIBUTE_GLOB, default: **/*.html)")
    ap.add_argument("--group", action="append", help="Group key: preset name ($CLASS, $HTML, ...), regexp or $DEFAULT (can be repeated; fallback: env ATTRIBUTE_GROUPS)")
    ap.add_argument("--sort", type=str.upper, choices=SORT_CHOICES, help="Sort attributes inside each group (fallback: env ATTRIBUTE_SORT, default: NONE)")
    ap.add_argument("--case-sensitive", action="store_true", help="Match group regexps case-sensitively (fallback: env ATTRIBUTE_IGNORE_CASE=false)")
    ap.add_argument("--ignore-chars", help="Characters trimmed from both ends of attribute names before matching/sorting (fallback: env ATTRIBUTE_IGNORE_CHARS)")
    ap.add_argument("--parser", type=str.lower, choices=sorted(DEFAULT_GROUPS_BY_PARSER), help="Template dialect used for default groups (fallback: env ATTRIBUTE_PARSER, default: from file name)")
    ap.add_argument("--no-backup", action="store_true", help="Do not write .bak copies before rewriting")
    ap.add_argument("--dry-run", action="store_true")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    options = resolve_options(args)
    try:
        options.validate()
    except ValueError as e:
        raise SystemExit(f"[ERROR] {e}")

    root = Path(args.root)
    if not root.is_dir():
        raise SystemExit(f"root not found: {root}")

    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        print(f"[WARN] Collation locale unavailable, using code point order: {e}")

    files = find_files(root, options.glob)
    if not files:
        raise SystemExit(f"No files matching {options.glob} under {root}")

    changed_files = 0
    changed_tags = 0
    for path in files:
        src = path.read_text(encoding="utf-8", errors="ignore")
        try:
            out, tags = organize_html(src, options, options.parser or parser_for_path(path))
        except OrganizeError as e:
            raise SystemExit(f"[ERROR] {path}: {e}")
        if not tags:
            continue
        changed_files += 1
        changed_tags += tags
        print(f"[LOG] {path}: {tags} tags reordered")
        if args.dry_run:
            continue
        if not args.no_backup:
            bak = path.with_name(path.name + BACKUP_SUFFIX)
            if not bak.exists():
                bak.write_text(src, encoding="utf-8")
        path.write_text(out, encoding="utf-8")

    if args.dry_run:
        print(f"[ORG-ATTR] would change {changed_files} files ({changed_tags} tags)")
        return
    print(f"[ORG-ATTR] changed={changed_files} tags={changed_tags}")


if __name__ == "__main__":
    main()
