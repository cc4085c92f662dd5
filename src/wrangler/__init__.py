"""wrangler: row-oriented data-wrangling directives.

The package is organised in layers:

- contracts: leaf types shared across subsystem boundaries (rows, tokens,
  usage definitions, results, errors)
- markup: XML document parsing and compiled XPath queries
- directives: the directive base class, registry and built-in directives
- core: configuration, logging and invocation parsing
- engine: the recipe runner that drives directives through their lifecycle
"""

__version__ = "0.1.0"
