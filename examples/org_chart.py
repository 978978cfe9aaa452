#!/usr/bin/env python
# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Demo of ApterTree on a small organisation chart.

Usage:
    python examples/org_chart.py
"""

from __future__ import annotations

from apter_tree import ApterTree, CheckedApterTree, InvalidParentError


def build_chart() -> ApterTree:
    """Build the chart from a nested dict."""
    return CheckedApterTree({
        'CEO': {
            'CTO': {'Backend lead': {'Dev 1': None, 'Dev 2': None}, 'Ops': None},
            'CFO': {'Accountant': None},
        }
    })


def show(tree: ApterTree) -> None:
    """Print the tree with indentation."""
    for index, depth in tree.walk():
        print(f"{'  ' * depth}{tree[index]} [{index}]")


if __name__ == '__main__':
    chart = build_chart()
    show(chart)

    dev = chart.find('Dev 2')
    chain = ' -> '.join(chart[i] for i in chart.ancestors(dev))
    print(f"\nDev 2 reports to: {chain}")
    print(f"Individual contributors: {[chart[i] for i in chart.leaves()]}")

    try:
        chart.insert('Intern', 99)
    except InvalidParentError as exc:
        print(f"\nRefused: {exc}")

    removed = chart.delete_subtree(chart.find('CTO'))
    print(f"\nRemoved {removed}")
    show(chart)
