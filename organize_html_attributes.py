#!/usr/bin/env python3
"""
Organize element attributes in HTML / Vue / Angular templates.

Thin entry point around tools/organize_attributes.py that reads .env first:

  python organize_html_attributes.py --root site/ --sort ASC
  python organize_html_attributes.py --root src/app --glob '**/*.component.html' --parser angular

Environment fallbacks (CLI wins):
  ATTRIBUTE_GROUPS        Comma-separated group keys ($CLASS,$ID,^data-,$DEFAULT)
  ATTRIBUTE_SORT          ASC | DESC | NONE
  ATTRIBUTE_IGNORE_CASE   true | false (default true)
  ATTRIBUTE_IGNORE_CHARS  Characters trimmed from attribute names before matching
  ATTRIBUTE_PARSER        html | vue | angular (default: from file name)
  ATTRIBUTE_GLOB          File pattern under --root (default **/*.html)
"""
from __future__ import annotations

from dotenv import load_dotenv

from tools.organize_attributes import main as tool_main


def main(argv=None):
    load_dotenv()
    tool_main(argv)


if __name__ == "__main__":
    main()
