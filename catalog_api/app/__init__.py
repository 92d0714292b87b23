"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each resource (persons, products) is split into a
model, a store, a service and a router so that persistence can be
swapped without touching the HTTP handlers.  The load-generation and
greeting routes live alongside them under ``api/endpoints``.
"""
