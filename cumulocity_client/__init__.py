"""
Cumulocity Client Root Module

Typed asynchronous client for the Cumulocity IoT REST API.

Layer Structure:
- Domain: Wire models, transport entities, errors and API interfaces
- Infrastructure: Request pipeline, HTTP transport and API groups
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root and configuration
"""
