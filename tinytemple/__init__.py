"""TinyTemple static site generator.

This package renders a directory of Jinja2 templates, optionally paired with
Markdown content files, against a shared TOML (or YAML) configuration context
and copies static assets alongside the rendered HTML.

The main entry point is the CLI module, which wires the build pipeline:
- config: Loads the site configuration into the base render context.
- templates: Discovers, compiles and renders templates.
- content: Resolves optional Markdown content for each template.
- output: Writes rendered pages to the output directory.
- assets: Copies static files into the output directory.
- build: Orchestrates the pipeline.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
