"""
Version 1 of the API.

This subpackage bundles the storefront endpoints (users, catalog, cart
and shopping assistant) and the event content planner endpoints
(events, team, social accounts, posts, approvals, calendar and AI
copywriting).
"""
