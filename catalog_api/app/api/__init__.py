"""
API package containing the HTTP routes.

``router`` aggregates the resource routers; ``endpoints`` holds one
module per resource.  Handlers only translate between HTTP and the
service layer: failures raised by services are rendered by the
exception handlers registered in ``core.error_handlers``.
"""
