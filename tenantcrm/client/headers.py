"""
Header Composer.

Builds the headers for one request from a RequestContext. Pure: the same
context and extras always give the same headers.
"""

from tenantcrm.client.credentials import RequestContext


def build_headers(context: RequestContext, extra: dict[str, str] | None = None) -> dict[str, str]:
    """
    Compose request headers.

    - Content-Type and Accept are always JSON
    - Authorization only when the context carries a token
    - X-Tenant-Id only when the context carries a tenant
    - `extra` wins over generated headers; names compare case-insensitively

    Example:
        build_headers(RequestContext(token="t", tenant_id="acme"))
        # {"Content-Type": "application/json", "Accept": "application/json",
        #  "Authorization": "Bearer t", "X-Tenant-Id": "acme"}
    """
    headers = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    if context.token:
        headers["Authorization"] = f"Bearer {context.token}"
    if context.tenant_id:
        headers["X-Tenant-Id"] = context.tenant_id

    for name, value in (extra or {}).items():
        for existing in [key for key in headers if key.lower() == name.lower()]:
            del headers[existing]
        headers[name] = value
    return headers
