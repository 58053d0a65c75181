from __future__ import annotations

import unittest

from organize import DEFAULT_GROUP, organize, resolve
from presets import ANGULAR, CODE_GUIDE, HTML, PRESETS, VUE, default_groups


def names(values, groups):
    return organize(values, groups, presets=PRESETS).flat


class TestPresetTable(unittest.TestCase):
    def test_every_preset_resolves(self) -> None:
        for key in PRESETS:
            rules = resolve([key], PRESETS)
            self.assertEqual(sum(1 for r in rules if r.is_default), 1, key)

    def test_html_is_code_guide(self) -> None:
        html = [r.query for r in resolve([HTML], PRESETS)]
        guide = [r.query for r in resolve([CODE_GUIDE], PRESETS)]
        self.assertEqual(html, guide)
        self.assertEqual(html[0], PRESETS["$CLASS"])
        self.assertEqual(html[-1], DEFAULT_GROUP)

    def test_default_groups_by_parser(self) -> None:
        self.assertEqual(default_groups("html"), [HTML])
        self.assertEqual(default_groups("VUE"), [VUE])
        self.assertEqual(default_groups("angular"), [ANGULAR])
        self.assertEqual(default_groups("markdown"), [HTML])
        self.assertEqual(default_groups(None), [HTML])


class TestHtmlOrder(unittest.TestCase):
    def test_code_guide_order(self) -> None:
        values = ["style", "aria-label", "href", "data-id", "id", "class", "title"]
        self.assertEqual(
            names(values, [HTML]),
            ["class", "id", "data-id", "href", "title", "aria-label", "style"],
        )


class TestAngularOrder(unittest.TestCase):
    def test_bindings_after_plain_attributes(self) -> None:
        values = ["(click)", "[(ngModel)]", "[disabled]", "type", "*ngIf", "#ref", "id", "class"]
        self.assertEqual(
            names(values, [ANGULAR]),
            ["class", "id", "#ref", "*ngIf", "type", "[disabled]", "[(ngModel)]", "(click)"],
        )


class TestVueOrder(unittest.TestCase):
    def test_style_guide_order(self) -> None:
        values = [
            "v-html",
            "@click",
            "title",
            ":class",
            "v-custom",
            "v-model",
            "#header",
            ":key",
            "id",
            "v-once",
            "v-if",
            "v-for",
            "is",
        ]
        self.assertEqual(
            names(values, [VUE]),
            [
                "is",
                "v-for",
                "v-if",
                "v-once",
                "id",
                ":key",
                "#header",
                "v-model",
                "v-custom",
                "title",
                ":class",
                "@click",
                "v-html",
            ],
        )

    def test_v_on_and_v_bind_are_not_other_directives(self) -> None:
        self.assertEqual(names(["v-on:click", "v-bind:title", "v-focus"], [VUE]), ["v-focus", "v-bind:title", "v-on:click"])


if __name__ == "__main__":
    unittest.main()
