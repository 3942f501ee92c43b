from catalog import STORE
from catalog import snippets


def test_install_commands_for_id():
    commands = {snippet.id: snippet for snippet in snippets.install_commands("weather-mcp")}
    assert list(commands) == ["smithery", "npm", "docker", "docker-run"]
    assert commands["smithery"].text == "npx -y @smithery/cli install weather-mcp --client claude"
    assert commands["npm"].text == "npx @mcp/weather-mcp-server init $MCP_WEATHER-MCP_API_KEY"
    assert "image: mcp/weather-mcp-server:latest" in commands["docker"].text
    assert "MCP_WEATHER-MCP_API_KEY=your_api_key_here" in commands["docker"].text
    assert commands["docker-run"].text == "docker-compose up -d"


def test_code_tabs_for_server_with_samples():
    tabs = snippets.code_tabs(STORE.get("neon-mcp"))
    assert [tab.label for tab in tabs] == ["index.js", "package.json", "client.js", "types.ts"]
    assert "neon-mcp" in tabs[0].text


def test_code_tabs_without_types():
    tabs = snippets.code_tabs(STORE.get("weather-mcp"))
    assert [tab.id for tab in tabs] == ["main", "package", "client"]


def test_code_tabs_fall_back_to_generic_code():
    tabs = snippets.code_tabs(STORE.resolve("calendar-mcp"))
    assert [tab.label for tab in tabs] == ["index.js", "client.js"]
    assert "id: 'calendar-mcp'" in tabs[0].text
    assert "queryCalendar-mcp" in tabs[0].text
    assert "Calendar-mcp MCP Server is running" in tabs[0].text


def test_generic_code_keeps_template_literals():
    code = snippets.generic_server_code("files")
    assert "${query}" in code["main"]
    assert "${PORT}" in code["main"]
    assert "{{" not in code["main"]
    assert "experimental_createMCPClient" in code["client"]


def test_snippet_to_dict():
    snippet = snippets.install_commands("x")[0]
    assert snippet.to_dict() == {
        "id": "smithery",
        "label": "Via Smithery",
        "text": "npx -y @smithery/cli install x --client claude",
        "language": "bash",
    }
