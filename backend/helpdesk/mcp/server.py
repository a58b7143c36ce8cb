from mcp.server.fastmcp import FastMCP
from mcp.server.transport_security import TransportSecuritySettings

from helpdesk.config import settings

INSTRUCTIONS = (
    "Read-only triage view over the help-desk ticket queue. "
    "Call get_system_info for valid status and priority codes, "
    "then list_tickets to filter and the summary tools for counts and shares."
)

mcp = FastMCP(
    settings.app_name,
    instructions=INSTRUCTIONS,
    stateless_http=True,
    json_response=True,
    streamable_http_path="/",
    transport_security=TransportSecuritySettings(
        enable_dns_rebinding_protection=True,
        allowed_hosts=settings.mcp_allowed_hosts,
    ),
)
