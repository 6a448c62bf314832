"""
PetDemo: View Renderer
======================

What:  The Jinja2 template environment and static-asset location.
Who:   routes/pages.py renders pages; main.py renders the not-found page
       and mounts STATIC_DIR at /assets.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

PACKAGE_DIR = Path(__file__).parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

templates = Jinja2Templates(directory=TEMPLATES_DIR)
