"""FastMCP server exposing the Pod manifest validator as MCP tools.

Run via::

    podcheck-mcp                       # reads .env (default: stdio)
    MCP_TRANSPORT=http podcheck-mcp    # streamable HTTP on port 9000
    MCP_TRANSPORT=sse  podcheck-mcp    # legacy SSE on port 9000

Settings are loaded from environment variables and ``.env`` file.
"""

from __future__ import annotations

import json
import logging

from fastmcp import FastMCP

from podcheck import __version__
from podcheck.service.checker import ManifestChecker
from podcheck.settings import Settings
from podcheck.validation.sections import describe_schema as _schema_constants

# ---------------------------------------------------------------------------
# Server + shared state
# ---------------------------------------------------------------------------

logger = logging.getLogger("podcheck.mcp")

mcp = FastMCP("podcheck")
_checker = ManifestChecker()

# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------

SCHEMA_REFERENCE = """\
# Pod manifest schema

```yaml
apiVersion: v1                    # required, must be v1
kind: Pod                         # required, must be Pod
metadata:                         # required mapping
  name: web                       # required, non-empty
  namespace: default              # optional string
  labels:                         # optional, string keys and values
    app: web
spec:                             # required mapping
  os: linux                       # optional: linux | windows, or {name: linux}
  containers:                     # required, non-empty list
    - name: web_server            # required, lowercase_with_underscores
      image: registry.bigbrother.io/web:1.2   # required, registry prefix + :tag
      ports:                      # optional
        - containerPort: 8080     # required int 1..65535 (unquoted)
          protocol: TCP           # optional: TCP | UDP
      readinessProbe:             # optional
        httpGet:                  # required inside a probe
          path: /ready            # required, starts with /
          port: 8080              # required int 1..65535
      livenessProbe:              # optional, same shape as readinessProbe
        httpGet:
          path: /healthz
          port: 8080
      resources:                  # required mapping
        limits:                   # optional
          cpu: 2                  # int >= 0
          memory: 512Mi           # digits + Ki|Mi|Gi|Ti|Pi|Ei
        requests:                 # optional, same shape as limits
          cpu: 1
          memory: 256Mi
```

Multiple documents separated by `---` are validated independently.
"""


@mcp.resource("podcheck://schema")
def schema_reference() -> str:
    """Annotated example of the accepted Pod manifest shape."""
    return SCHEMA_REFERENCE


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool
def describe_schema() -> str:
    """Return the fixed schema constants (accepted values, units, port range) as JSON."""
    return json.dumps(_schema_constants(), indent=2)


@mcp.tool
def validate_manifest(manifest_yaml: str, filename: str = "manifest.yaml") -> str:
    """Validate a Pod manifest and list every violation with its line.

    Args:
        manifest_yaml: Complete YAML content; may hold several documents.
        filename: Label used in the reported ``<file>:<line>`` prefixes.
    """
    logger.info("validate_manifest called (yaml length=%d)", len(manifest_yaml))
    logger.debug("validate_manifest yaml:\n%s", manifest_yaml)
    result = _checker.check_string(manifest_yaml, filename)
    if result.valid:
        return f"Manifest is valid ({result.documents} document(s))."

    lines = [f"Manifest has {len(result.diagnostics)} violation(s):"]
    lines.extend(f"  {entry}" for entry in result.rendered)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "podcheck MCP server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
