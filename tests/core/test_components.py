from mdxscaffold.core.rendering.components import (
    accordion,
    bullets,
    card,
    card_group,
    code_block,
    code_group,
    document,
    front_matter,
    section,
    steps,
)


def test_front_matter() -> None:
    assert front_matter("Data Flow", "AWO Platform data flow documentation") == (
        '---\ntitle: "Data Flow"\ndescription: "AWO Platform data flow documentation"\n---'
    )


def test_card_attributes_are_optional() -> None:
    assert card("Audit", "Checklists") == '<Card title="Audit">\n  Checklists\n</Card>'
    assert card("Audit", "Checklists", icon="shield", href="/x") == (
        '<Card title="Audit" icon="shield" href="/x">\n  Checklists\n</Card>'
    )


def test_card_group_indents_cards() -> None:
    group = card_group([card("One", "first"), card("Two", "second", href="/two")])

    assert group == (
        "<CardGroup cols={2}>\n"
        '  <Card title="One">\n'
        "    first\n"
        "  </Card>\n"
        '  <Card title="Two" href="/two">\n'
        "    second\n"
        "  </Card>\n"
        "</CardGroup>"
    )


def test_steps() -> None:
    assert steps([("Plan", "Plan it"), ("Ship", "Ship it")]) == (
        "<Steps>\n"
        '  <Step title="Plan">\n'
        "    Plan it\n"
        "  </Step>\n"
        '  <Step title="Ship">\n'
        "    Ship it\n"
        "  </Step>\n"
        "</Steps>"
    )


def test_code_group_separates_blocks_with_blank_line() -> None:
    group = code_group([code_block("bash", "ls"), code_block("sql", "SELECT 1;")])

    assert group == "<CodeGroup>\n```bash\nls\n```\n\n```sql\nSELECT 1;\n```\n</CodeGroup>"


def test_accordion_and_bullets() -> None:
    assert accordion("More", "text") == '<Accordion title="More">\ntext\n</Accordion>'
    assert bullets(["a", "b"]) == "- a\n- b"


def test_document_layout() -> None:
    body = document("T", "desc", section("Overview", "Hello."), section("Next", "Bye."))

    assert body == '---\ntitle: "T"\ndescription: "desc"\n---\n\n# T\n\n## Overview\n\nHello.\n\n## Next\n\nBye.\n'
