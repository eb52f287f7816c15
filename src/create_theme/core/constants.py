"""Fixed layout conventions for generated themes."""

from pathlib import Path

# Where target packages are installed; a package is themeable iff
# MODULE_ROOT/<name>/THEME_SEGMENT exists.
MODULE_ROOT = Path("node_modules")
THEME_SEGMENT = "theme"

# Generated stylesheets land in THEMES_DIRECTORY/<theme key>/
THEMES_DIRECTORY = Path("src/themes")
THEME_FILE_NAME = "theme.ts"

CSS_MODULE_EXTENSION = ".m.css"
COMPILED_MODULE_SUFFIX = CSS_MODULE_EXTENSION + ".js"
COMPILED_MODULE_PATTERN = f"**/*{COMPILED_MODULE_SUFFIX}"

# Selector maps carry bookkeeping entries whose names start with this prefix
# (e.g. " _key"); they are not CSS classes.
METADATA_KEY_PREFIX = " _"
