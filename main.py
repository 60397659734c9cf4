"""
benchpress CLI
Entry point для прогона бенчмарков в окружении хоста.

Примеры:
    # Прогон функции
    python main.py run mypkg.bench:fib -n 20
    python main.py run mypkg.bench:sort_list -n 5 -i 100 -o out

    # Информация
    python main.py info
"""

import asyncio
import argparse
import importlib
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from dotenv import load_dotenv
load_dotenv()

from benchpress.config import get_settings, setup_logging
from benchpress.core import create_host_runner
from benchpress.schemas.capabilities import Capability, bind
from benchpress.utils.cli import print_section, print_kv, print_sample_result

# Настраиваем логирование при старте
setup_logging()


def load_target(target: str):
    """Импортировать функцию по строке вида "module:function" """
    module_name, sep, attr = target.partition(":")
    if not sep or not attr:
        raise ValueError(f"Ожидается формат module:function, получено '{target}'")

    module = importlib.import_module(module_name)
    return getattr(module, attr)


async def cmd_run(args):
    """Прогнать сэмпл"""
    execute = load_target(args.target)

    bindings = [bind(Capability.SAMPLE_DESCRIPTION, {"target": args.target})]
    if args.output:
        bindings.append(bind(Capability.RESULTS_DIR, args.output))

    runner = create_host_runner(bindings)

    result = await runner.sample(
        args.id or args.target.replace(":", "."),
        execute=execute,
        microiterations=args.microiterations,
        sample_count=args.samples,
    )

    print_sample_result(result, runner.result_path(result))


def cmd_info(args):
    """Показать действующие настройки"""
    settings = get_settings()

    print_section("Настройки")
    print_kv("Папка результатов", settings.paths.results_dir)
    print_kv("Замеров по умолчанию", str(settings.runner.sample_count))
    print_kv("Микроитераций", str(settings.runner.microiterations))
    timeout = settings.runner.write_timeout
    print_kv("Таймаут записи", f"{timeout}с" if timeout else "нет")
    print_kv("Уровень логов", settings.logging.level)
    if settings.logging.file.enabled:
        print_kv("Файл логов", settings.get_log_file_path())
    print()


def main():
    parser = argparse.ArgumentParser(
        description="benchpress CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  %(prog)s run mypkg.bench:fib -n 20       # 20 замеров функции fib
  %(prog)s run mypkg.bench:fib -o out      # Результат в папку out
  %(prog)s info                            # Действующие настройки
        """
    )
    subparsers = parser.add_subparsers(dest="command", help="Команды")

    # run command
    run_parser = subparsers.add_parser("run", help="Прогнать сэмпл")
    run_parser.add_argument("target",
                           help="Измеряемая функция в формате module:function")
    run_parser.add_argument("-n", "--samples", type=int,
                           help="Количество замеров (по умолчанию из settings.yaml)")
    run_parser.add_argument("-i", "--microiterations", type=int,
                           help="Вызовов функции на один замер")
    run_parser.add_argument("-o", "--output",
                           help="Папка для результата")
    run_parser.add_argument("--id",
                           help="ID сэмпла (по умолчанию — имя функции)")

    # info command
    subparsers.add_parser("info", help="Показать настройки")

    args = parser.parse_args()
    if not args.command:
        parser.print_help()
        return

    if args.command == "run":
        asyncio.run(cmd_run(args))
    elif args.command == "info":
        cmd_info(args)


if __name__ == "__main__":
    main()
