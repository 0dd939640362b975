"""Command line entry point: translate a Prisma DMMF file into a Keystone 6
schema module.

Run with: prisma2keystone -f schema.dmmf.json -o schema.ts --enum
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from .config import GeneratorConfig
from .emitters import EMITTERS, get_emitter
from .source import SourceSchema
from .translation import TranslationError, translate_schema

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_CHOICES = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


def parse_cli_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments of the generator."""
    parser = argparse.ArgumentParser(
        prog="prisma2keystone",
        description="Generate a Keystone 6 schema from a Prisma DMMF document.",
    )
    parser.add_argument(
        "-f",
        "--file",
        required=True,
        type=Path,
        help="Prisma DMMF file (.json, .yaml or .yml).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output file. Overrides P2K_OUTPUT. Default: generated.ts",
    )
    parser.add_argument(
        "--enum",
        "--generate-enums",
        dest="generate_enums",
        action="store_true",
        help="Generate the enums of the Prisma schema. Overrides P2K_GENERATE_ENUMS.",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=sorted(EMITTERS),
        default=None,
        type=str.lower,
        help="Output format. Overrides P2K_FORMAT. Default: keystone",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        default=None,
        type=str.upper,
        help="Logging level. Overrides P2K_LOG_LEVEL.",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=Path(".env"),
        help="Dotenv file to read settings from. Default: .env",
    )
    return parser.parse_args(argv)


def configure_logging(level_name: str) -> None:
    logging.basicConfig(level=level_name, format=LOG_FORMAT)
    logging.getLogger("prisma2keystone").setLevel(level_name)


def generate(config: GeneratorConfig) -> Path:
    """Translate the schema file of the configuration and write the result.

    Args:
        config (GeneratorConfig): The settings of the run.

    Returns:
        Path: The path of the written output file.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        ValueError: If the schema file cannot be read or validated.
        yaml.YAMLError: If a YAML schema file is malformed.
        TranslationError: If the schema cannot be translated. Nothing is
            written in that case.
    """
    if config.schema_file is None:
        raise ValueError("No schema file given.")
    schema = SourceSchema.from_file(config.schema_file)

    logger.info("Started generating Keystone schema from %s", config.schema_file)
    result = translate_schema(schema, emit_enums=config.generate_enums)
    if config.generate_enums:
        logger.info("Generated %d enums of the Prisma schema", len(result.enums))
    for lst in result.lists:
        logger.info("Generated %s model", lst.modelName)

    emitter = get_emitter(config.output_format)
    return emitter.write(result, config.output)


def main(argv: list[str] | None = None) -> int:
    args = parse_cli_args(argv)
    config = GeneratorConfig.from_environment(env_file=args.env_file).merge(
        schema_file=args.file,
        output=args.output,
        generate_enums=True if args.generate_enums else None,
        output_format=args.output_format,
        log_level=args.log_level,
    )
    configure_logging(config.log_level)

    try:
        output = generate(config)
    except FileNotFoundError:
        logger.error("Prisma schema file %s doesn't exist!", config.schema_file)
        return 1
    except ValidationError as e:
        logger.error("Invalid Prisma schema document: %s", e)
        return 1
    except yaml.YAMLError as e:
        logger.error("Malformed Prisma schema file %s: %s", config.schema_file, e)
        return 1
    except TranslationError as e:
        logger.error("Translation failed: %s", e)
        return 1
    except ValueError as e:
        logger.error("%s", e)
        return 1

    logger.info("Wrote %s output to %s", config.output_format, output)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
