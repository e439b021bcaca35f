import argparse
import asyncio
import json
import sys

from config import NLUConfig, load_logging_config
from nlu.pipeline import NLUPipeline
from utils import setup_logger
from utils.errors import NLUError

logging_config = load_logging_config()
logger = setup_logger(
    name="nlu_cli",
    log_file=logging_config.LOG_FILE,
    level=logging_config.LOG_LEVEL,
)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Вычислить намерения и сущности для предложения")
    parser.add_argument("sentence", help="Предложение пользователя")
    parser.add_argument("--locale", default="en")
    parser.add_argument("--qna", choices=["before", "after"], default=None)
    parser.add_argument("--spellchecking", metavar="KEY", default=None, help="Ключ словаря")
    parser.add_argument("--multi-intent", action="store_true")
    parser.add_argument(
        "--extractor",
        action="append",
        default=[],
        metavar="MODULE:CLASS",
        help="Пользовательский экстрактор (можно несколько раз)",
    )
    parser.add_argument("--filter", metavar="MODULE:FUNC", default=None, help="Фильтр классификации")
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Главная функция: одно предложение, один вызов compute."""
    args = parse_args(argv)
    config = NLUConfig(
        locale=args.locale,
        qna=args.qna,
        spellchecking=args.spellchecking,
        multi_intent=args.multi_intent,
    )

    try:
        async with NLUPipeline(
            config,
            extractors=args.extractor,
            classification_filter=args.filter,
        ) as pipeline:
            result = await pipeline.compute(args.sentence)
    except NLUError as e:
        logger.error(f"Ошибка NLU: {e}")
        return 1

    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


def run():
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Программа прервана пользователем")


if __name__ == "__main__":
    run()
