import importlib
import logging
import os

from flask import Blueprint

logger = logging.getLogger(__name__)


class ModuleManager:
    def __init__(self, app):
        self.app = app
        self.modules_dir = os.path.join(app.root_path, "modules")
        self.ignored_modules_file = os.path.join(os.getenv("WORKING_DIR", ""), ".moduleignore")
        self.ignored_modules = self._load_ignored_modules()

    def _load_ignored_modules(self):
        ignored_modules = []
        if os.path.exists(self.ignored_modules_file):
            with open(self.ignored_modules_file, "r") as f:
                ignored_modules = [line.strip() for line in f if line.strip() and not line.startswith("#")]
        return ignored_modules

    def module_names(self):
        names = []
        for module_name in sorted(os.listdir(self.modules_dir)):
            module_path = os.path.join(self.modules_dir, module_name)
            if (
                os.path.isdir(module_path)
                and not module_name.startswith("__")
                and module_name not in self.ignored_modules
            ):
                names.append(module_name)
        return names

    def register_modules(self):
        self.app.modules = {}
        for module_name in self.module_names():
            try:
                routes_module = importlib.import_module(f"app.modules.{module_name}.routes")
            except ModuleNotFoundError as e:
                logger.error("Could not load the routes for module '%s': %s", module_name, e)
                continue

            for item in dir(routes_module):
                blueprint = getattr(routes_module, item)
                if isinstance(blueprint, Blueprint) and blueprint.name not in self.app.blueprints:
                    self.app.register_blueprint(blueprint)
                    self.app.modules[module_name] = blueprint
