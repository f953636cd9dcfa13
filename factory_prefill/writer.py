"""Factory module emission."""

import keyword
import logging
from pathlib import Path

from factory_prefill.assembler import PASSWORD_EXPRESSION
from factory_prefill.models import Definition, ModelInfo
from factory_prefill.naming import factory_class_name, factory_module_name

logger = logging.getLogger(__name__)

FACTORY_TEMPLATE = '''"""Factory for {qualified_name}.

Generated by factory-prefill. Adjust freely, regeneration only overwrites this
file when asked to.
"""

{imports}

fake = Faker("{locale}")

TABLE = "{qualified_name}"


class {class_name}(factory.DictFactory):
    """Rows for {qualified_name}."""
{body}
'''

PACKAGE_INIT = '"""Generated factories."""\n'

# Expressions that are factory_boy declarations already
DECLARATION_PREFIX = "factory."


class FactoryWriter:
    """Write factory modules from definitions."""

    def __init__(self, output_dir: Path | str, locale: str = "en_US", overwrite: bool = False):
        """
        Initialize writer.

        Args:
            output_dir: Directory receiving factory modules
            locale: Faker locale used by the generated module
            overwrite: Replace existing factory modules
        """
        self.output_dir = Path(output_dir)
        self.locale = locale
        self.overwrite = overwrite

    def factory_path(self, model: ModelInfo) -> Path:
        """Get the path of a model's factory module."""
        return self.output_dir / f"{factory_module_name(model.name)}.py"

    def factory_exists(self, model: ModelInfo) -> bool:
        """Check if factory already exists."""
        return self.factory_path(model).exists()

    def render(self, model: ModelInfo, definitions: list[Definition]) -> str:
        """
        Render the factory module source.

        Args:
            model: Model the factory is for
            definitions: Assembled definitions

        Returns:
            Python source of the factory module
        """
        imports = []
        if any(d.expression == PASSWORD_EXPRESSION for d in definitions):
            imports.append("import hashlib\n")
        imports.append("import factory")
        imports.append("from faker import Faker")

        lines = [self._render_line(d) for d in definitions if d.expression is not None]
        body = "\n".join(lines) if lines else "    pass"

        return FACTORY_TEMPLATE.format(
            qualified_name=model.qualified_name,
            imports="\n".join(imports),
            locale=self.locale,
            class_name=factory_class_name(model.name),
            body="\n" + body,
        )

    @staticmethod
    def _render_line(definition: Definition) -> str:
        expression = definition.expression
        if not expression.startswith(DECLARATION_PREFIX):
            expression = f"factory.LazyFunction(lambda: {expression})"

        key = definition.key
        if not key.isidentifier() or keyword.iskeyword(key):
            logger.warning(f"Column '{key}' is not a valid attribute name, commenting it out")
            return f"    # {key!r}: {expression}"
        return f"    {key} = {expression}"

    def write(self, model: ModelInfo, definitions: list[Definition]) -> Path | None:
        """
        Write the factory module for a model.

        Args:
            model: Model the factory is for
            definitions: Assembled definitions

        Returns:
            Written path, or None if the factory exists and overwrite is off
        """
        path = self.factory_path(model)
        if not self.overwrite and path.exists():
            logger.info(f"Factory for {model.qualified_name} already exists at {path}")
            return None

        self.output_dir.mkdir(parents=True, exist_ok=True)
        init_file = self.output_dir / "__init__.py"
        if not init_file.exists():
            init_file.write_text(PACKAGE_INIT)

        path.write_text(self.render(model, definitions))
        logger.info(f"Wrote factory for {model.qualified_name} to {path}")
        return path
