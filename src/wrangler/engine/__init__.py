"""Recipe execution: drives directives through their lifecycle."""

from wrangler.engine.recipe import RecipeRunner, build_directive, open_recipe

__all__ = [
    "RecipeRunner",
    "build_directive",
    "open_recipe",
]
