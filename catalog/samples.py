"""Display-only source samples for the featured servers.

These strings are rendered verbatim on detail pages; nothing here is executed.
"""

WEATHER_MAIN = """
import { createServer } from 'http';
import { experimental_createMCPServer } from 'ai/mcp-server';
import { z } from 'zod';
import fetch from 'node-fetch';

const server = experimental_createMCPServer({
  id: 'weather-mcp',
  name: 'Weather MCP Server',
  version: '2.1.0',
  description: 'MCP server for weather data and forecasts',

  tools: {
    getCurrentWeather: {
      description: 'Get current weather conditions for a location',
      parameters: z.object({
        location: z.string().describe('The location to get weather for'),
        units: z.enum(['metric', 'imperial']).default('metric'),
      }),
      execute: async ({ location, units }) => {
        const apiKey = process.env.WEATHER_API_KEY;
        const response = await fetch(
          `https://api.weatherapi.com/v1/current.json?key=${apiKey}&q=${encodeURIComponent(location)}`
        );
        const data = await response.json();
        const temp = units === 'imperial' ? data.current.temp_f : data.current.temp_c;
        return {
          location: data.location.name,
          temperature: temp,
          condition: data.current.condition.text,
          humidity: `${data.current.humidity}%`,
        };
      },
    },

    getForecast: {
      description: 'Get weather forecast for a location',
      parameters: z.object({
        location: z.string().describe('The location to get forecast for'),
        days: z.number().min(1).max(10).default(5),
      }),
      execute: async ({ location, days }) => {
        const apiKey = process.env.WEATHER_API_KEY;
        const response = await fetch(
          `https://api.weatherapi.com/v1/forecast.json?key=${apiKey}&q=${encodeURIComponent(location)}&days=${days}`
        );
        const data = await response.json();
        return data.forecast.forecastday.map((day) => ({
          date: day.date,
          maxTemp: day.day.maxtemp_c,
          minTemp: day.day.mintemp_c,
          condition: day.day.condition.text,
        }));
      },
    },
  },
});

const httpServer = createServer((req, res) => {
  server.handleRequest(req, res).catch((err) => {
    console.error('Error handling MCP request:', err);
    res.writeHead(500, { 'Content-Type': 'application/json' });
    res.end(JSON.stringify({ error: 'Internal server error' }));
  });
});

const PORT = process.env.PORT || 3000;
httpServer.listen(PORT, () => {
  console.log(`Weather MCP Server running on port ${PORT}`);
});
"""

WEATHER_PACKAGE = """{
  "name": "weather-mcp-server",
  "version": "2.1.0",
  "description": "MCP server for weather data and forecasts",
  "main": "index.js",
  "type": "module",
  "scripts": {
    "start": "node index.js",
    "dev": "nodemon index.js"
  },
  "dependencies": {
    "ai": "^2.2.12",
    "node-fetch": "^3.3.2",
    "zod": "^3.22.4"
  },
  "devDependencies": {
    "nodemon": "^3.0.1"
  },
  "engines": {
    "node": ">=18.0.0"
  }
}"""

NEON_MAIN = """
import { createServer } from 'http';
import { experimental_createMCPServer } from 'ai/mcp-server';
import { z } from 'zod';
import fetch from 'node-fetch';

const NEON_API = 'https://console.neon.tech/api/v2';

async function neon(path, options = {}) {
  const response = await fetch(`${NEON_API}${path}`, {
    ...options,
    headers: {
      Authorization: `Bearer ${process.env.NEON_API_KEY}`,
      'Content-Type': 'application/json',
    },
  });
  if (!response.ok) {
    throw new Error(`Neon API returned ${response.status}: ${response.statusText}`);
  }
  return response.json();
}

const server = experimental_createMCPServer({
  id: 'neon-mcp',
  name: 'Neon Database MCP Server',
  version: '1.2.0',
  description: 'MCP server for managing Neon Postgres databases',

  tools: {
    listProjects: {
      description: 'List all Neon projects',
      parameters: z.object({}),
      execute: async () => {
        const data = await neon('/projects');
        return data.projects.map((project) => ({ id: project.id, name: project.name }));
      },
    },

    createProject: {
      description: 'Create a new Neon project',
      parameters: z.object({
        name: z.string().describe('Name of the project'),
        regionId: z.string().default('aws-us-east-2'),
      }),
      execute: async ({ name, regionId }) => {
        const data = await neon('/projects', {
          method: 'POST',
          body: JSON.stringify({ project: { name, region_id: regionId } }),
        });
        return { id: data.project.id, name: data.project.name };
      },
    },

    createBranch: {
      description: 'Create a branch in a Neon project',
      parameters: z.object({
        projectId: z.string(),
        name: z.string().describe('Name of the branch'),
      }),
      execute: async ({ projectId, name }) => {
        const data = await neon(`/projects/${projectId}/branches`, {
          method: 'POST',
          body: JSON.stringify({ branch: { name } }),
        });
        return { id: data.branch.id, name: data.branch.name };
      },
    },
  },
});

const httpServer = createServer((req, res) => server.handleRequest(req, res));
httpServer.listen(process.env.PORT || 3000);
"""

NEON_PACKAGE = """{
  "name": "neon-mcp-server",
  "version": "1.2.0",
  "description": "MCP server for managing Neon Postgres databases",
  "main": "index.js",
  "type": "module",
  "scripts": {
    "start": "node index.js"
  },
  "dependencies": {
    "ai": "^2.2.12",
    "node-fetch": "^3.3.2",
    "zod": "^3.22.4"
  },
  "engines": {
    "node": ">=18.0.0"
  }
}"""

NEON_TYPES = """
export interface NeonProject {
  id: string;
  name: string;
  region_id: string;
  created_at: string;
}

export interface NeonBranch {
  id: string;
  name: string;
  project_id: string;
  parent_id?: string;
}
"""

GITHUB_MAIN = """
import { createServer } from 'http';
import { experimental_createMCPServer } from 'ai/mcp-server';
import { z } from 'zod';
import { Octokit } from '@octokit/rest';

const octokit = new Octokit({ auth: process.env.GITHUB_TOKEN });

const server = experimental_createMCPServer({
  id: 'github-mcp',
  name: 'GitHub Assistant MCP Server',
  version: '3.0.1',
  description: 'MCP server for GitHub repositories, issues, and pull requests',

  tools: {
    listRepositories: {
      description: 'List repositories for the authenticated user',
      parameters: z.object({
        sort: z.enum(['created', 'updated', 'pushed', 'full_name']).default('updated'),
      }),
      execute: async ({ sort }) => {
        const { data } = await octokit.repos.listForAuthenticatedUser({ sort });
        return data.map((repo) => ({ id: repo.id, name: repo.name, stars: repo.stargazers_count }));
      },
    },

    listIssues: {
      description: 'List open issues for a repository',
      parameters: z.object({
        owner: z.string(),
        repo: z.string(),
      }),
      execute: async ({ owner, repo }) => {
        const { data } = await octokit.issues.listForRepo({ owner, repo, state: 'open' });
        return data.map((issue) => ({
          id: issue.id,
          title: issue.title,
          labels: issue.labels.map((label) => ({ name: label.name, color: label.color })),
        }));
      },
    },

    createIssue: {
      description: 'Open a new issue',
      parameters: z.object({
        owner: z.string(),
        repo: z.string(),
        title: z.string(),
        body: z.string().optional(),
      }),
      execute: async ({ owner, repo, title, body }) => {
        const { data } = await octokit.issues.create({ owner, repo, title, body });
        return { number: data.number, url: data.html_url };
      },
    },
  },
});

const httpServer = createServer((req, res) => server.handleRequest(req, res));
httpServer.listen(process.env.PORT || 3000);
"""

GITHUB_PACKAGE = """{
  "name": "github-mcp-server",
  "version": "3.0.1",
  "description": "MCP server for GitHub repositories, issues, and pull requests",
  "main": "index.js",
  "type": "module",
  "scripts": {
    "start": "node index.js"
  },
  "dependencies": {
    "@octokit/rest": "^20.0.2",
    "ai": "^2.2.12",
    "zod": "^3.22.4"
  },
  "engines": {
    "node": ">=18.0.0"
  }
}"""

CLIENT_TEMPLATE = """
import {{ experimental_createMCPClient }} from 'ai';
import {{ Experimental_StdioMCPTransport }} from 'ai/mcp-stdio';
import {{ generateText }} from 'ai';
import {{ openai }} from '@ai-sdk/openai';

async function main() {{
  try {{
    const mcpClient = await experimental_createMCPClient({{
      transport: new Experimental_StdioMCPTransport({{
        command: 'node',
        args: ['index.js'],
      }}),
    }});

    const tools = await mcpClient.tools();

    const response = await generateText({{
      model: openai('gpt-4o'),
      tools,
      messages: [
        {{ role: 'user', content: '{prompt}' }}
      ],
    }});

    console.log('Response:', response.text);
  }} catch (error) {{
    console.error('Error:', error);
  }}
}}

main();
"""
