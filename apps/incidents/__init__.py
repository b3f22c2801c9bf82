"""
Incident tracking app.

Keeps a single collection of incidents and enforces their lifecycle rules:

- Status moves freely between Open, Investigating and Resolved
- Context notes, AI artifacts and the timeline are append-only
- Every mutation adds exactly one timeline entry
- Metrics are derived from the collection on every read
"""
