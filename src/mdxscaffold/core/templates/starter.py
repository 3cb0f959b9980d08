"""Minimal placeholder templates for the ``starter`` profile."""

from __future__ import annotations

from mdxscaffold.core.rendering.components import card, code_block, document, info, section

_AUTH_HEADER = "Authorization: Bearer YOUR_JWT_TOKEN"


def _under_development(what: str) -> str:
    return info(f"This page is under development. Please check back later for complete {what}.")


def render_api(title: str) -> str:
    return document(
        title,
        f"{title} endpoint documentation",
        section("Overview", "This endpoint documentation is coming soon.", _under_development("documentation")),
        section("Authentication", "This endpoint requires authentication.", code_block("bash", _AUTH_HEADER)),
        section(
            "Request",
            code_block(
                "bash",
                'curl -X GET "https://api.awo-platform.com/v1/endpoint" \\\n'
                '  -H "Authorization: Bearer YOUR_JWT_TOKEN"',
            ),
        ),
        section("Response", code_block("json", '{\n  "success": true,\n  "data": {}\n}')),
    )


def render_guide(title: str) -> str:
    return document(
        title,
        f"{title} implementation guide",
        section("Overview", "This guide documentation is coming soon.", _under_development("implementation guide")),
        section("Getting Started", "Step-by-step instructions will be added here."),
        section("Examples", "Code examples and best practices will be provided."),
        section(
            "Next Steps",
            card(
                "Related Documentation",
                "Explore other sections of our documentation",
                href="/api-reference/introduction",
            ),
        ),
    )


def render_sdk(title: str) -> str:
    return document(
        title,
        f"{title} SDK documentation",
        section("Overview", "SDK documentation is coming soon.", _under_development("SDK documentation")),
        section("Installation", "Installation instructions will be added here."),
        section("Quick Start", code_block("bash", "# Installation command\nnpm install @awo-platform/sdk")),
        section("Examples", "Code examples will be provided."),
    )


def render_resource(title: str) -> str:
    return document(
        title,
        f"{title} reference documentation",
        section("Overview", "This resource documentation is coming soon.", _under_development("reference material")),
        section("Content", "Reference content will be added here."),
        section("Related Resources", "Additional resources and links will be provided."),
    )


TEMPLATES = {
    "api": render_api,
    "guide": render_guide,
    "sdk": render_sdk,
    "resource": render_resource,
}
