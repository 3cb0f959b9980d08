"""Section-specific templates for the ``complete`` profile.

Each renderer takes the derived page title and returns the full page body.
Only the title (and its :mod:`~mdxscaffold.core.naming` variants) varies
between pages of the same category.
"""

from __future__ import annotations

from mdxscaffold.core.naming import compact, identifier, slug
from mdxscaffold.core.rendering.components import (
    accordion,
    bullets,
    card,
    card_group,
    code_block,
    code_group,
    document,
    info,
    section,
    steps,
    warning,
)

PLATFORM = "AWO Platform"


def render_getting_started(title: str) -> str:
    return document(
        title,
        f"{title} for {PLATFORM}",
        section(
            "Overview",
            info(
                f"This section provides essential information about the {PLATFORM} "
                "for financial inclusion in the SADC region."
            ),
        ),
        section("Key Points", f"Content for {title.lower()} will be added here."),
        section(
            "Next Steps",
            card_group(
                [
                    card(
                        "Quick Setup",
                        "Get started with AWO development environment",
                        icon="rocket",
                        href="/quick-setup/development-environment",
                    ),
                    card(
                        "API Reference",
                        "Explore AWO API documentation",
                        icon="code",
                        href="/api-reference/introduction",
                    ),
                ]
            ),
        ),
    )


def render_quick_setup(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"Step-by-step {lowered} guide for {PLATFORM}",
        section(
            "Prerequisites",
            "Before starting, ensure you have:\n"
            + bullets(["Node.js 18+ installed", "Git configured", "Access to AWO development resources"]),
            info(f"This guide will help you set up {lowered} quickly and efficiently."),
        ),
        section(
            "Step-by-Step Instructions",
            steps(
                [
                    ("Initial Setup", "Setup instructions will be added here"),
                    ("Configuration", "Configuration details will be provided"),
                    ("Verification", "Verification steps will be included"),
                ]
            ),
        ),
        section("Troubleshooting", "Common issues and solutions will be documented here."),
        section(
            "Next Steps",
            card("Continue Setup", "Proceed to the next setup step", href="/quick-setup/api-setup"),
        ),
    )


def render_architecture(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} documentation",
        section(
            "Overview",
            info(
                f"This section covers the {lowered} of the {PLATFORM}, "
                "designed for financial inclusion across the SADC region."
            ),
        ),
        section("Architecture Components", "Detailed architecture information will be provided here."),
        section(
            "Key Decisions",
            card_group(
                [
                    card("Technology Stack", "React Native, Express.js, PostgreSQL", icon="layers"),
                    card("Design Principles", "Scalability, Security, Simplicity", icon="compass"),
                ]
            ),
        ),
        section("Implementation Details", "Technical implementation details will be documented here."),
        section(
            "Related Documentation",
            card("System Overview", "Explore the complete system architecture", href="/architecture/system-overview"),
        ),
    )


def render_data_models(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} schema and relationships",
        section(
            "Overview",
            info(f"This section documents the {lowered} used in the {PLATFORM} for financial services."),
        ),
        section(
            "Schema Definition",
            "Database schema and model definitions will be provided here.",
            code_block(
                "sql",
                "-- Schema example will be added\n"
                "CREATE TABLE example (\n"
                "  id SERIAL PRIMARY KEY,\n"
                "  created_at TIMESTAMP DEFAULT NOW()\n"
                ");",
            ),
        ),
        section("Relationships", "Entity relationships and data flow will be documented here."),
        section(
            "Usage Examples",
            code_group(
                [
                    code_block(
                        "typescript TypeScript",
                        "// TypeScript interface example\n"
                        "interface ExampleModel {\n"
                        "  id: number;\n"
                        "  createdAt: Date;\n"
                        "}",
                    ),
                    code_block("sql SQL Query", "-- SQL query example\nSELECT * FROM example WHERE id = $1;"),
                ]
            ),
        ),
        section("Best Practices", "Data modeling best practices will be included here."),
    )


def render_core_features(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} core functionality",
        section(
            "Overview",
            info(
                f"{title} is a core feature of the {PLATFORM}, "
                "designed to support financial inclusion for African women."
            ),
        ),
        section("Key Features", "Core functionality will be documented here."),
        section(
            "Implementation",
            steps(
                [
                    ("Setup", "Initial setup and configuration"),
                    ("Integration", "Integration with other AWO services"),
                    ("Testing", "Testing and validation procedures"),
                ]
            ),
        ),
        section(
            "API Integration",
            code_block(
                "typescript",
                f"// Example API integration\nconst response = await awo.{compact(title)}.method();",
            ),
        ),
        section("Best Practices", "Implementation best practices will be provided here."),
        section(
            "Related Features",
            card_group(
                [
                    card("DIVA Scoring", "Financial health assessment system", href="/core-features/diva-scoring"),
                    card("Chama Management", "Digital savings group platform", href="/core-features/basic-chama"),
                ]
            ),
        ),
    )


def render_advanced_features(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} advanced functionality",
        section(
            "Overview",
            info(
                f"{title} is an advanced feature of the {PLATFORM}, "
                "providing sophisticated financial services for experienced users."
            ),
        ),
        section("Advanced Capabilities", "Advanced functionality will be documented here."),
        section(
            "Configuration",
            accordion("Advanced Configuration Options", f"Configuration details for {lowered} will be provided here."),
        ),
        section("Implementation Guide", "Detailed implementation steps will be included here."),
        section("Performance Considerations", "Performance optimization tips will be documented here."),
        section(
            "Enterprise Features",
            card_group(
                [
                    card(
                        "SME Marketplace",
                        "Business investment opportunities",
                        href="/advanced-features/sme-marketplace",
                    ),
                    card(
                        "Wealth Coaching",
                        "Professional financial advisory",
                        href="/advanced-features/wealth-coaching",
                    ),
                ]
            ),
        ),
    )


def render_development(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} development guide",
        section("Overview", info(f"This guide covers {lowered} for {PLATFORM} development.")),
        section("Development Setup", "Development setup instructions will be provided here."),
        section(
            "Code Examples",
            code_block(
                "typescript",
                "// Development example\n"
                "import { AWOPlatform } from '@awo-platform/core';\n"
                "\n"
                "const awo = new AWOPlatform({\n"
                "  apiKey: process.env.AWO_API_KEY\n"
                "});",
            ),
        ),
        section("Best Practices", "Development best practices will be documented here."),
        section(
            "Tools and Resources",
            card_group(
                [
                    card("API Reference", "Complete API documentation", href="/api-reference/introduction"),
                    card("Testing Guide", "Testing strategies and tools", href="/testing/testing-strategy"),
                ]
            ),
        ),
    )


def render_testing(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} testing guide",
        section("Overview", info(f"This guide covers {lowered} for the {PLATFORM} financial services.")),
        section("Testing Strategy", "Testing approach and methodologies will be documented here."),
        section(
            "Test Implementation",
            code_block(
                "typescript",
                "// Test example\n"
                f"describe('{title}', () => {{\n"
                "  it('should pass validation', () => {\n"
                "    // Test implementation\n"
                "  });\n"
                "});",
            ),
        ),
        section("Test Coverage", "Coverage requirements and measurement will be detailed here."),
        section(
            "Continuous Testing",
            card_group(
                [
                    card("Unit Testing", "Component and service testing", href="/testing/unit-testing"),
                    card("Integration Testing", "End-to-end system testing", href="/testing/integration-testing"),
                ]
            ),
        ),
    )


def render_api_reference(title: str) -> str:
    return document(
        title,
        f"{PLATFORM} {title} API endpoint",
        section("Overview", info(f"This endpoint provides {title.lower()} functionality for the {PLATFORM}.")),
        section(
            "Authentication",
            "All API requests require authentication:",
            code_block("bash", "Authorization: Bearer YOUR_JWT_TOKEN"),
        ),
        section(
            "Request",
            code_block(
                "bash",
                f'curl -X POST "https://api.awo-platform.com/v1/{slug(title)}" \\\n'
                '  -H "Authorization: Bearer YOUR_JWT_TOKEN" \\\n'
                '  -H "Content-Type: application/json" \\\n'
                "  -d '{\n"
                '    "example": "data"\n'
                "  }'",
            ),
        ),
        section(
            "Response",
            code_block(
                "json",
                "{\n"
                '  "success": true,\n'
                '  "data": {\n'
                '    "id": "example",\n'
                '    "status": "completed"\n'
                "  },\n"
                '  "timestamp": "2025-01-20T10:00:00Z"\n'
                "}",
            ),
        ),
        section(
            "Error Handling",
            accordion("Common Error Responses", "Error codes and responses will be documented here."),
        ),
        section(
            "Rate Limits",
            "This endpoint has the following rate limits:\n"
            + bullets(["100 requests per minute per user", "1000 requests per hour per user"]),
        ),
        section(
            "Related Endpoints",
            card_group(
                [
                    card("Authentication", "User authentication endpoints", href="/api-reference/auth/login"),
                    card("User Management", "User profile management", href="/api-reference/users/profile"),
                ]
            ),
        ),
    )


def render_integration(title: str) -> str:
    lowered = title.lower()
    client = f"{identifier(title)}Client"
    return document(
        title,
        f"{PLATFORM} {lowered} integration guide",
        section("Overview", info(f"This guide covers {lowered} integration with the {PLATFORM}.")),
        section("Prerequisites", "Integration requirements will be listed here."),
        section(
            "Setup Instructions",
            steps(
                [
                    ("API Configuration", "Configure API credentials and endpoints"),
                    ("Webhook Setup", "Set up webhooks for real-time updates"),
                    ("Testing", "Test the integration in sandbox environment"),
                ]
            ),
        ),
        section(
            "Code Examples",
            code_block(
                "typescript",
                "// Integration example\n"
                f"import {{ {client} }} from '@awo-platform/integrations';\n"
                "\n"
                f"const client = new {client}({{\n"
                "  apiKey: process.env.API_KEY,\n"
                "  environment: 'sandbox'\n"
                "});",
            ),
        ),
        section("Webhooks", "Webhook configuration and handling will be documented here."),
        section(
            "Troubleshooting",
            accordion("Common Integration Issues", "Common problems and solutions will be provided here."),
        ),
    )


def render_security(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} security documentation",
        section("Overview", info(f"This section covers {lowered} for the {PLATFORM} financial services.")),
        section("Security Measures", "Security implementation details will be documented here."),
        section(
            "Compliance",
            card_group(
                [
                    card("GDPR Compliance", "European data protection compliance", icon="shield"),
                    card("POPIA Compliance", "South African data protection compliance", icon="lock"),
                ]
            ),
        ),
        section("Best Practices", "Security best practices will be provided here."),
        section("Incident Response", "Security incident procedures will be documented here."),
        section(
            "Related Security Topics",
            card("Security Overview", "Complete security documentation", href="/security/overview"),
        ),
    )


def render_deployment(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} deployment guide",
        section("Overview", info(f"This guide covers {lowered} for the {PLATFORM}.")),
        section(
            "Deployment Steps",
            steps(
                [
                    ("Environment Preparation", "Prepare deployment environment"),
                    ("Configuration", "Configure deployment settings"),
                    ("Deployment", "Execute deployment process"),
                    ("Verification", "Verify successful deployment"),
                ]
            ),
        ),
        section("Configuration", "Deployment configuration will be documented here."),
        section("Monitoring", "Post-deployment monitoring setup will be covered here."),
        section("Rollback Procedures", accordion("Emergency Rollback", "Rollback procedures will be documented here.")),
    )


def render_infrastructure(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} infrastructure documentation",
        section("Overview", info(f"This section covers {lowered} for the {PLATFORM} infrastructure.")),
        section("Infrastructure Components", "Infrastructure details will be documented here."),
        section("Scaling Strategy", "Scaling approach and implementation will be covered here."),
        section(
            "Performance Optimization",
            card_group(
                [
                    card("Database Optimization", "PostgreSQL performance tuning", icon="database"),
                    card("API Optimization", "Express.js performance optimization", icon="zap"),
                ]
            ),
        ),
        section("Monitoring & Alerts", "Monitoring setup and alerting will be documented here."),
    )


def render_guides(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} implementation guide",
        section("Overview", info(f"This comprehensive guide covers {lowered} for the {PLATFORM}.")),
        section(
            "Step-by-Step Implementation",
            steps(
                [
                    ("Planning", "Plan your implementation approach"),
                    ("Setup", "Set up required components"),
                    ("Implementation", "Implement the feature"),
                    ("Testing", "Test your implementation"),
                    ("Deployment", "Deploy to production"),
                ]
            ),
        ),
        section("Code Examples", "Implementation examples will be provided here."),
        section("Best Practices", "Implementation best practices will be documented here."),
        section("Common Pitfalls", warning("Common mistakes and how to avoid them will be listed here.")),
        section(
            "Next Steps",
            card("Related Guides", "Explore other implementation guides", href="/guides/integration-walkthrough"),
        ),
    )


def render_business(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} business documentation",
        section(
            "Overview",
            info(
                f"This section provides {lowered} information for the {PLATFORM}, "
                "focusing on financial inclusion in the SADC region."
            ),
        ),
        section("Business Context", "Business information will be documented here."),
        section(
            "Market Analysis",
            card_group(
                [
                    card("SADC Market", "Southern African Development Community market analysis", icon="globe"),
                    card("Gender Gap", "$12.6B gender investment gap opportunity", icon="chart-bar"),
                ]
            ),
        ),
        section("Key Metrics", "Business metrics and KPIs will be provided here."),
        section("Strategic Considerations", "Strategic business considerations will be documented here."),
    )


def render_compliance(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} compliance documentation",
        section(
            "Overview",
            info(f"This section covers {lowered} requirements for the {PLATFORM} across SADC markets."),
        ),
        section("Regulatory Requirements", "Compliance requirements will be documented here."),
        section(
            "Implementation",
            steps(
                [
                    ("Assessment", "Assess compliance requirements"),
                    ("Implementation", "Implement compliance measures"),
                    ("Monitoring", "Monitor ongoing compliance"),
                ]
            ),
        ),
        section("Documentation", "Required documentation and record-keeping will be covered here."),
        section(
            "Audit Procedures",
            card("Audit Checklist", "Complete audit procedures and checklists", href="/compliance/audit-procedures"),
        ),
    )


def render_resources(title: str) -> str:
    lowered = title.lower()
    return document(
        title,
        f"{PLATFORM} {lowered} resources and references",
        section("Overview", info(f"This section provides {lowered} for {PLATFORM} development and integration.")),
        section("Available Resources", "Resource details will be documented here."),
        section("Download Links", "Download links and access information will be provided here."),
        section(
            "Usage Examples",
            code_group(
                [
                    code_block(
                        "bash Terminal",
                        f'# Example usage\ncurl -O "https://resources.awo-platform.com/{slug(title)}"',
                    ),
                    code_block(
                        "typescript TypeScript",
                        f"// Integration example\nimport resource from './{slug(title)}';",
                    ),
                ]
            ),
        ),
        section(
            "Related Resources",
            card_group(
                [
                    card("API Reference", "Complete API documentation", href="/api-reference/introduction"),
                    card("Code Samples", "Implementation examples", href="/resources/code-samples"),
                ]
            ),
        ),
    )


TEMPLATES = {
    "getting-started": render_getting_started,
    "quick-setup": render_quick_setup,
    "architecture": render_architecture,
    "data-models": render_data_models,
    "core-features": render_core_features,
    "advanced-features": render_advanced_features,
    "development": render_development,
    "testing": render_testing,
    "api-reference": render_api_reference,
    "integration": render_integration,
    "security": render_security,
    "deployment": render_deployment,
    "infrastructure": render_infrastructure,
    "guides": render_guides,
    "business": render_business,
    "compliance": render_compliance,
    "resources": render_resources,
}
