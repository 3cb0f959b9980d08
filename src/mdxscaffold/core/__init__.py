"""Core scaffolding domain: contracts, manifests, templates, engine."""
