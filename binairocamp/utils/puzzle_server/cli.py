#!/usr/bin/env python3
"""
Binairo 命令行界面

使用方法:
1. 启动服务器：
   python -m binairocamp.utils.puzzle_server --mode serve --config_yaml_path config/server.yaml --port 8080

2. 生成谜题（打印文本网格，可选保存图片）：
   python -m binairocamp.utils.puzzle_server --mode generate --size 6 --seed 42 --image_path puzzle.png

3. 批量生成到目录（annotations.json + images/）：
   python -m binairocamp.utils.puzzle_server --mode generate --size 6 --num_cases 10 --output_dir out

4. 求解 / 校验文本网格（"-" 表示标准输入）：
   python -m binairocamp.utils.puzzle_server --mode solve --input puzzle.txt
   python -m binairocamp.utils.puzzle_server --mode validate --input answer.txt
"""

import argparse
import os
import sys
from typing import List, Optional

from binairocamp.bootcamps.binairo import (
    BinairoGenerator,
    ValidationOutcome,
    create_grid_image,
    format_grid,
    generate_puzzle,
    parse_grid_text,
    parse_size,
    solve_puzzle,
    validate_puzzle,
)
from binairocamp.src.errors import BinairoError
from binairocamp.utils.format_time_now import format_time_now

from .server import BinairoPuzzleServer
from .utils import is_port_available, load_server_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Binairo 谜题生成、求解与校验")
    parser.add_argument("--mode", choices=["serve", "generate", "solve", "validate"], default="serve",
                        help="运行模式")
    parser.add_argument("--config_yaml_path", type=str, default=None, help="YAML 配置文件路径")
    parser.add_argument("--host", type=str, default=None, help="服务器主机地址")
    parser.add_argument("--port", type=int, default=None, help="服务器端口")
    parser.add_argument("--log_dir", type=str, default=None, help="日志目录")
    parser.add_argument("--size", type=str, default="6", help="网格边长")
    parser.add_argument("--seed", type=int, default=None, help="随机种子")
    parser.add_argument("--input", type=str, default="-", help="文本网格文件，'-' 表示标准输入")
    parser.add_argument("--image_path", type=str, default=None, help="将网格保存为 PNG 图片")
    parser.add_argument("--output_dir", type=str, default=None, help="批量生成的输出目录")
    parser.add_argument("--num_cases", type=int, default=1, help="批量生成数量")
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def _save_image(grid, image_path: Optional[str]):
    if image_path:
        create_grid_image(grid).save(image_path)
        print(f"🖼️  图片已保存: {image_path}")


def run_serve(args) -> int:
    log_file = None
    if args.log_dir:
        os.makedirs(args.log_dir, exist_ok=True)
        log_file = os.path.join(args.log_dir, f"server_{format_time_now()}.log")
        print(f"📄 日志文件: {log_file}")

    config = load_server_config(args.config_yaml_path, {
        "host": args.host,
        "port": args.port,
        "log_file": log_file,
    })
    if not is_port_available(config.host, config.port):
        print(f"⚠️  端口 {config.port} 可能已被占用")

    server = BinairoPuzzleServer(config)
    server.run()
    return 0


def run_generate(args) -> int:
    config = load_server_config(args.config_yaml_path)
    if args.output_dir:
        size = parse_size(args.size, config.max_grid_size)
        generator = BinairoGenerator(output_folder=args.output_dir)
        cases = generator.generate(num_cases=args.num_cases, size=size, base_seed=args.seed,
                                   max_steps=config.solver_max_steps)
        print(f"✅ 已生成 {len(cases)} 个谜题到 {args.output_dir}")
        return 0

    grid = generate_puzzle(args.size, seed=args.seed, max_size=config.max_grid_size,
                           max_steps=config.solver_max_steps)
    print(format_grid(grid))
    _save_image(grid, args.image_path)
    return 0


def run_solve(args) -> int:
    config = load_server_config(args.config_yaml_path)
    grid = parse_grid_text(_read_input(args.input))
    parse_size(grid.size, config.max_grid_size)
    solve_puzzle(grid, max_steps=config.solver_max_steps)
    print(format_grid(grid))
    _save_image(grid, args.image_path)
    if not grid.is_complete():
        print("❌ 无解", file=sys.stderr)
        return 2
    return 0


def run_validate(args) -> int:
    config = load_server_config(args.config_yaml_path)
    grid = parse_grid_text(_read_input(args.input))
    parse_size(grid.size, config.max_grid_size)
    outcome = validate_puzzle(grid)
    print(outcome.value)
    return 0 if outcome is ValidationOutcome.VALID else 2


MODES = {
    "serve": run_serve,
    "generate": run_generate,
    "solve": run_solve,
    "validate": run_validate,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return MODES[args.mode](args)
    except (BinairoError, RuntimeError, OSError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
