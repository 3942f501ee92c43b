"""Copyable code blocks shown on detail and install pages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from .models import Server
from .samples import CLIENT_TEMPLATE


@dataclass(frozen=True)
class Snippet:
    id: str
    label: str
    text: str
    language: str = "text"

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "label": self.label, "text": self.text, "language": self.language}


GENERIC_SERVER_TEMPLATE = """
import {{ createServer }} from 'http';
import {{ experimental_createMCPServer as createMCPServer }} from 'ai/mcp-server';
import {{ z }} from 'zod';

const server = createMCPServer({{
  id: '{server_id}',
  name: '{title} MCP Server',
  version: '1.0.0',
  description: 'MCP server for {server_id}',

  tools: {{
    query{title}: {{
      description: 'Query {server_id} data',
      parameters: z.object({{
        query: z.string().describe('The query to run'),
      }}),
      execute: async ({{ query }}) => {{
        return {{
          result: `Results for query: ${{query}}`,
          timestamp: new Date().toISOString(),
        }};
      }},
    }},

    create{title}Resource: {{
      description: 'Create a new resource',
      parameters: z.object({{
        name: z.string().describe('Name of the resource'),
        properties: z.record(z.any()).describe('Properties of the resource'),
      }}),
      execute: async ({{ name, properties }}) => {{
        return {{
          id: `resource_${{Date.now()}}`,
          name,
          created: true,
        }};
      }},
    }},
  }},
}});

const httpServer = createServer((req, res) => {{
  if (req.url === '/') {{
    res.writeHead(200, {{ 'Content-Type': 'text/plain' }});
    res.end('{title} MCP Server is running');
    return;
  }}

  server.handleRequest(req, res).catch((err) => {{
    console.error('Error handling MCP request:', err);
    res.writeHead(500, {{ 'Content-Type': 'application/json' }});
    res.end(JSON.stringify({{ error: 'Internal server error' }}));
  }});
}});

const PORT = process.env.PORT || 3000;
httpServer.listen(PORT, () => {{
  console.log(`{title} MCP Server running on port ${{PORT}}`);
}});
"""

DOCKER_COMPOSE_TEMPLATE = """version: '3'
services:
  {server_id}-mcp:
    image: mcp/{server_id}-server:latest
    environment:
      - {api_key_var}=your_api_key_here
    ports:
      - "3000:3000"
    restart: unless-stopped"""


def _title(server_id: str) -> str:
    return server_id[:1].upper() + server_id[1:]


def api_key_variable(server_id: str) -> str:
    return f"MCP_{server_id.upper()}_API_KEY"


def generic_server_code(server_id: str) -> Dict[str, str]:
    """Template server and client code for servers that ship no samples."""

    return {
        "main": GENERIC_SERVER_TEMPLATE.format(server_id=server_id, title=_title(server_id)),
        "client": CLIENT_TEMPLATE.format(prompt=f"Use the {server_id} tools to answer my question"),
    }


def install_commands(server_id: str) -> List[Snippet]:
    return [
        Snippet(
            id="smithery",
            label="Via Smithery",
            text=f"npx -y @smithery/cli install {server_id} --client claude",
            language="bash",
        ),
        Snippet(
            id="npm",
            label="Via npm",
            text=f"npx @mcp/{server_id}-server init ${api_key_variable(server_id)}",
            language="bash",
        ),
        Snippet(
            id="docker",
            label="Via Docker",
            text=DOCKER_COMPOSE_TEMPLATE.format(
                server_id=server_id, api_key_var=api_key_variable(server_id)
            ),
            language="yaml",
        ),
        Snippet(id="docker-run", label="Run the container", text="docker-compose up -d", language="bash"),
    ]


def code_tabs(server: Server) -> List[Snippet]:
    """The code tabs for *server*'s detail page."""

    code = server.server_code
    if code is None:
        generic = generic_server_code(server.id)
        return [
            Snippet(id="main", label="index.js", text=generic["main"], language="javascript"),
            Snippet(id="client", label="client.js", text=generic["client"], language="javascript"),
        ]

    tabs = [
        Snippet(id="main", label="index.js", text=code.main, language="javascript"),
        Snippet(id="package", label="package.json", text=code.package, language="json"),
        Snippet(id="client", label="client.js", text=code.client, language="javascript"),
    ]
    if code.types:
        tabs.append(Snippet(id="types", label="types.ts", text=code.types, language="typescript"))
    return tabs
