"""The curated list of MCP servers shown in the store."""

from __future__ import annotations

from typing import Tuple

from . import samples
from .models import Server, ServerCode


def _placeholder_image(label: str) -> str:
    return f"/placeholder.svg?height=400&width=600&text={label.replace(' ', '+')}"


# Ordered as the store lists them by default; featured entries come first.
SERVERS: Tuple[Server, ...] = (
    Server(
        id="weather-mcp",
        name="Weather Service",
        description=(
            "Get real-time weather data and forecasts for any location with natural "
            "language queries."
        ),
        long_description=(
            "The Weather MCP Server provides access to real-time weather data and "
            "forecasts through natural language. Ask about current conditions, "
            "forecasts, or historical weather data for any location worldwide. The "
            "server connects to multiple weather APIs to provide comprehensive and "
            "accurate information."
        ),
        category="Utilities",
        downloads=12487,
        rating=4.7,
        reviews=342,
        author="Climate Data Inc.",
        version="2.1.0",
        last_updated="2025-03-10",
        requirements=("API Key (free tier available)", "Node.js >= v18.0.0"),
        features=(
            "Current weather conditions for any location",
            "7-day weather forecasts",
            "Historical weather data",
            "Natural language query processing",
            "Support for multiple weather data providers",
        ),
        image=_placeholder_image("Weather MCP"),
        featured=True,
        server_code=ServerCode(
            main=samples.WEATHER_MAIN,
            package=samples.WEATHER_PACKAGE,
            client=samples.CLIENT_TEMPLATE.format(
                prompt="How is the weather in New York today?"
            ),
        ),
    ),
    Server(
        id="neon-mcp",
        name="Neon Database",
        description=(
            "Manage your Neon Postgres databases using natural language commands with "
            "the Neon MCP Server."
        ),
        long_description=(
            "The Neon MCP Server is an open-source tool that lets you interact with "
            "your Neon Postgres databases in natural language. Create databases, "
            "manage projects, run queries, and perform migrations with simple "
            "conversational commands."
        ),
        category="Database",
        downloads=5432,
        rating=4.9,
        reviews=187,
        author="Neon",
        version="1.2.0",
        last_updated="2025-03-15",
        requirements=("Neon API Key", "Node.js >= v18.0.0"),
        features=(
            "Natural language interaction with Neon databases",
            "Project management through conversational commands",
            "Branch management for database versioning",
            "SQL query execution via natural language",
            "Database migration support",
        ),
        image=_placeholder_image("Neon MCP"),
        featured=True,
        server_code=ServerCode(
            main=samples.NEON_MAIN,
            package=samples.NEON_PACKAGE,
            client=samples.CLIENT_TEMPLATE.format(
                prompt="List my Neon projects and create a dev branch"
            ),
            types=samples.NEON_TYPES,
        ),
    ),
    Server(
        id="github-mcp",
        name="GitHub Assistant",
        description=(
            "Access GitHub repositories, issues, and PRs through natural language "
            "queries and commands."
        ),
        long_description=(
            "The GitHub MCP Server provides a natural language interface to GitHub. "
            "Browse repositories, manage issues, review pull requests, and more using "
            "conversational commands. Perfect for developers who want to streamline "
            "their GitHub workflow."
        ),
        category="Development",
        downloads=8765,
        rating=4.8,
        reviews=231,
        author="DevTools Inc.",
        version="3.0.1",
        last_updated="2025-02-28",
        requirements=("GitHub Personal Access Token", "Node.js >= v18.0.0"),
        features=(
            "Repository browsing and management",
            "Issue tracking and creation",
            "Pull request reviews and management",
            "Code search capabilities",
            "GitHub Actions monitoring",
        ),
        image=_placeholder_image("GitHub MCP"),
        featured=True,
        server_code=ServerCode(
            main=samples.GITHUB_MAIN,
            package=samples.GITHUB_PACKAGE,
            client=samples.CLIENT_TEMPLATE.format(
                prompt="Show the open issues in my most recently updated repository"
            ),
        ),
    ),
    Server(
        id="calendar-mcp",
        name="Calendar Manager",
        description=(
            "Create, view, and manage calendar events with natural language commands "
            "across multiple platforms."
        ),
        category="Productivity",
        downloads=4321,
        rating=4.6,
        reviews=156,
        author="ProductivityTools",
        version="2.3.0",
        last_updated="2025-03-05",
        requirements=("Google Calendar/Microsoft 365 API access", "Node.js >= v18.0.0"),
        features=(
            "Event creation and management",
            "Schedule viewing and planning",
            "Meeting scheduling assistance",
            "Multi-calendar support",
            "Timezone handling",
        ),
        image=_placeholder_image("Calendar MCP"),
    ),
    Server(
        id="docs-mcp",
        name="Documentation Browser",
        description=(
            "Search and browse documentation for popular frameworks and libraries "
            "using natural language."
        ),
        category="Development",
        downloads=3567,
        rating=4.9,
        reviews=98,
        author="DevDocs",
        version="1.5.0",
        last_updated="2025-03-12",
        requirements=("Node.js >= v18.0.0",),
        features=(
            "Documentation search across multiple sources",
            "Code examples and snippets",
            "API reference browsing",
            "Framework-specific guides",
            "Offline documentation access",
        ),
        image=_placeholder_image("Docs MCP"),
    ),
    Server(
        id="analytics-mcp",
        name="Analytics Viewer",
        description=(
            "Access and visualize analytics data from various platforms using "
            "conversational queries."
        ),
        category="Business",
        downloads=2876,
        rating=4.4,
        reviews=76,
        author="DataViz Inc.",
        version="2.0.0",
        last_updated="2025-02-20",
        requirements=("Google Analytics/Adobe Analytics API access", "Node.js >= v18.0.0"),
        features=(
            "Traffic and conversion metrics",
            "Custom report generation",
            "Data comparison across time periods",
            "Audience insights",
            "Campaign performance analysis",
        ),
        image=_placeholder_image("Analytics MCP"),
    ),
    Server(
        id="translate-mcp",
        name="Translation Service",
        description=(
            "Translate text between languages using natural language commands with "
            "advanced capabilities."
        ),
        category="Utilities",
        downloads=6543,
        rating=4.7,
        reviews=189,
        author="LingTech",
        version="3.1.0",
        last_updated="2025-03-18",
        requirements=("Translation API key", "Node.js >= v18.0.0"),
        features=(
            "Support for 100+ languages",
            "Context-aware translations",
            "Document translation",
            "Idiom and slang handling",
            "Technical terminology support",
        ),
        image=_placeholder_image("Translate MCP"),
    ),
    Server(
        id="file-mcp",
        name="File Manager",
        description=(
            "Manage files across cloud storage platforms with natural language "
            "commands and queries."
        ),
        category="Productivity",
        downloads=3987,
        rating=4.5,
        reviews=112,
        author="CloudFiles Inc.",
        version="1.8.0",
        last_updated="2025-03-02",
        requirements=(
            "Cloud storage API access (Google Drive, Dropbox, etc.)",
            "Node.js >= v18.0.0",
        ),
        features=(
            "File search and retrieval",
            "Cross-platform file operations",
            "File sharing and permissions",
            "Document preview",
            "File organization assistance",
        ),
        image=_placeholder_image("File MCP"),
    ),
)
