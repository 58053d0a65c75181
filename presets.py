#!/usr/bin/env python3
"""
Built-in attribute-name presets.

Each preset maps a "$NAME" group key to one pattern or an ordered list of
group keys/patterns. Composite presets ($HTML, $VUE, $ANGULAR) refer to the
smaller ones by name and are expanded by organize.resolve().
"""
from __future__ import annotations

from typing import Dict, List

from organize import DEFAULT_GROUP, Presets


CLASS = "$CLASS"
ID = "$ID"
NAME = "$NAME"
DATA = "$DATA"
SRC = "$SRC"
FOR = "$FOR"
TYPE = "$TYPE"
HREF = "$HREF"
VALUE = "$VALUE"
TITLE = "$TITLE"
ALT = "$ALT"
ROLE = "$ROLE"
ARIA = "$ARIA"

ANGULAR_ELEMENT_REF = "$ANGULAR_ELEMENT_REF"
ANGULAR_STRUCTURAL_DIRECTIVE = "$ANGULAR_STRUCTURAL_DIRECTIVE"
ANGULAR_INPUT = "$ANGULAR_INPUT"
ANGULAR_TWO_WAY_BINDING = "$ANGULAR_TWO_WAY_BINDING"
ANGULAR_OUTPUT = "$ANGULAR_OUTPUT"

VUE_DEFINITION = "$VUE_DEFINITION"
VUE_LIST_RENDERING = "$VUE_LIST_RENDERING"
VUE_CONDITIONALS = "$VUE_CONDITIONALS"
VUE_RENDER_MODIFIERS = "$VUE_RENDER_MODIFIERS"
VUE_GLOBAL = "$VUE_GLOBAL"
VUE_UNIQUE = "$VUE_UNIQUE"
VUE_SLOT = "$VUE_SLOT"
VUE_TWO_WAY_BINDING = "$VUE_TWO_WAY_BINDING"
VUE_OTHER_DIRECTIVES = "$VUE_OTHER_DIRECTIVES"
VUE_EVENTS = "$VUE_EVENTS"
VUE_CONTENT = "$VUE_CONTENT"

CODE_GUIDE = "$CODE_GUIDE"
HTML = "$HTML"
ANGULAR = "$ANGULAR"
VUE = "$VUE"
DEFAULT = DEFAULT_GROUP


PRESETS: Presets = {
    # plain attributes
    CLASS: r"^class$",
    ID: r"^id$",
    NAME: r"^name$",
    DATA: r"^data-",
    SRC: r"^src$",
    FOR: r"^for$",
    TYPE: r"^type$",
    HREF: r"^href$",
    VALUE: r"^value$",
    TITLE: r"^title$",
    ALT: r"^alt$",
    ROLE: r"^role$",
    ARIA: r"^aria-",
    # angular template syntax
    ANGULAR_ELEMENT_REF: r"^#",
    ANGULAR_STRUCTURAL_DIRECTIVE: r"^\*",
    ANGULAR_INPUT: r"^\[[^(].*\]$",
    ANGULAR_TWO_WAY_BINDING: r"^\[\(.*\)\]$",
    ANGULAR_OUTPUT: r"^\(.*\)$",
    # vue style guide attribute order
    VUE_DEFINITION: r"^(v-)?is$",
    VUE_LIST_RENDERING: r"^v-for$",
    VUE_CONDITIONALS: r"^v-(if|else-if|else|show|cloak)$",
    VUE_RENDER_MODIFIERS: r"^v-(pre|once)$",
    VUE_GLOBAL: r"^id$",
    VUE_UNIQUE: r"^(:|v-bind:)?(ref|key)$",
    VUE_SLOT: r"^(v-slot([:.].*)?|slot|#.*)$",
    VUE_TWO_WAY_BINDING: r"^v-model([:.].*)?$",
    # v-on / v-bind / v-html / v-text have their own slots further down
    VUE_OTHER_DIRECTIVES: r"^v-(?!on:|bind:|html$|text$)",
    VUE_EVENTS: r"^(@|v-on:)",
    VUE_CONTENT: r"^v-(html|text)$",
    # composites
    CODE_GUIDE: [CLASS, ID, NAME, DATA, SRC, FOR, TYPE, HREF, VALUE, TITLE, ALT, ROLE, ARIA],
    HTML: [CODE_GUIDE],
    ANGULAR: [
        CLASS,
        ID,
        ANGULAR_ELEMENT_REF,
        ANGULAR_STRUCTURAL_DIRECTIVE,
        DEFAULT,
        ANGULAR_INPUT,
        ANGULAR_TWO_WAY_BINDING,
        ANGULAR_OUTPUT,
    ],
    VUE: [
        VUE_DEFINITION,
        VUE_LIST_RENDERING,
        VUE_CONDITIONALS,
        VUE_RENDER_MODIFIERS,
        VUE_GLOBAL,
        VUE_UNIQUE,
        VUE_SLOT,
        VUE_TWO_WAY_BINDING,
        VUE_OTHER_DIRECTIVES,
        DEFAULT,
        VUE_EVENTS,
        VUE_CONTENT,
    ],
}

DEFAULT_GROUPS_BY_PARSER: Dict[str, str] = {
    "html": HTML,
    "vue": VUE,
    "angular": ANGULAR,
}


def default_groups(parser: str | None) -> List[str]:
    """Group keys used when none were configured (unknown parsers fall back to $HTML)."""
    return [DEFAULT_GROUPS_BY_PARSER.get(str(parser or "").lower(), HTML)]
