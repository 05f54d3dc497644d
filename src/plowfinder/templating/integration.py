"""Kida environment setup.

Creates a kida Environment from the SiteConfig. The environment is created
once per build run or app session and reused for every render.
"""

from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from plowfinder.config import SiteConfig


def create_environment(config: SiteConfig) -> Environment:
    """Create a kida Environment from site configuration.

    A configured ``template_dir`` is searched first, so a deployment can
    override any packaged template by name.
    """
    loaders = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(PackageLoader("plowfinder.templating", "templates"))

    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )
    env.add_global("site", config)
    return env


def render_template(env: Environment, name: str, **context: Any) -> str:
    """Render a full template to string."""
    template = env.get_template(name)
    return template.render(context)
