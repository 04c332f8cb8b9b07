import json
import logging
import os
import random
import time
from typing import Any, Dict, List, Optional

from binairocamp.src.errors import InvalidSize

from .grid import Grid
from .render import create_grid_image
from .solver import solve
from .text_format import format_grid, format_question_language

logger = logging.getLogger(__name__)
logger.setLevel(os.getenv("BINAIRO_LOGGING_LEVEL", "WARN"))


def generate(size: int, seed: Optional[int] = None, max_steps: Optional[int] = None) -> Grid:
    """
    Build a puzzle: solve the empty grid, then empty floor(size²/2) cells.

    The solver is deterministic, so every puzzle of a given size comes from
    the same solution; only the set of emptied cells changes between runs.
    Emptied cells become editable and the remaining ones fixed.

    Args:
        size: side length, must be positive
        seed: makes the emptied cells reproducible
        max_steps: solver budget; SearchBudgetExceeded propagates when it is hit

    Returns:
        Grid: the puzzle
    """
    if size <= 0:
        raise InvalidSize(f"Invalid grid size: {size}")

    grid = solve(Grid.empty(size), max_steps=max_steps)
    rng = random.Random(seed)

    num_cells_to_remove = (size * size) // 2
    if not grid.is_complete():
        logger.warning(f"No solution exists for size {size}, returning an empty puzzle")
        num_cells_to_remove = 0

    while num_cells_to_remove > 0:
        i, j = rng.randrange(size), rng.randrange(size)
        # Already-emptied cells are drawn again until a filled one comes up.
        if grid.get(i, j) is None:
            continue
        grid.clear(i, j)
        num_cells_to_remove -= 1

    for i, j in grid.coordinates():
        grid.cells[i][j].fixed = grid.get(i, j) is not None
    return grid


class BinairoGenerator:
    """Batch puzzle generation with optional annotations/images on disk"""

    def __init__(self, output_folder: str = "."):
        self.output_folder = output_folder
        self.puzzle_name = "binairo"

    def generate(self, num_cases: int, size: int, output_folder: Optional[str] = None,
                 save_to_disk: bool = True, base_seed: Optional[int] = None,
                 max_steps: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        批量生成 Binairo 问题。

        Args:
            num_cases: 生成数量
            size: 网格边长
            output_folder: 可选，覆盖初始化时的输出目录
            save_to_disk: 是否把 annotations.json 与图片写入输出目录
            base_seed: 基础种子，默认取当前时间戳
            max_steps: 每次求解的检查步数上限

        Returns:
            list: 生成的问题条目列表
        """
        base_output_dir = output_folder if output_folder is not None else self.output_folder
        if save_to_disk:
            images_dir = os.path.join(base_output_dir, "images")
            os.makedirs(images_dir, exist_ok=True)

        if base_seed is None:
            base_seed = int(time.time())
        logger.info(f"Seed initialized: {base_seed}")

        annotations = []
        for i in range(num_cases):
            derived_seed = (base_seed + i) % (2**32)
            logger.info(f"Generating Binairo puzzle (size={size}, seed={derived_seed}) [{i+1}/{num_cases}]")
            case = self.generate_case(size, derived_seed, max_steps=max_steps)

            if save_to_disk:
                image_filename = f"{case['index']}.png"
                create_grid_image(self._puzzle_grid(case)).save(os.path.join(images_dir, image_filename))
                case["image"] = f"images/{image_filename}"
            annotations.append(case)

        if save_to_disk:
            self.save_annotations(annotations, base_output_dir)
        return annotations

    def generate_case(self, size: int, seed: int, max_steps: Optional[int] = None) -> Dict[str, Any]:
        puzzle = generate(size, seed=seed, max_steps=max_steps)
        solution = solve(puzzle.copy(), max_steps=max_steps)
        return {
            "index": f"{self.puzzle_name}_{size}_{seed}",
            "size": size,
            "seed": seed,
            "puzzle": puzzle.values(),
            "fixed": puzzle.fixed_mask(),
            "solution": solution.values(),
            "question_language": format_question_language(puzzle),
            "answer": format_grid(solution),
        }

    @staticmethod
    def _puzzle_grid(case: Dict[str, Any]) -> Grid:
        return Grid.from_values(case["puzzle"], case["fixed"])

    def save_annotations(self, annotations: List[Dict[str, Any]], output_folder: str):
        """
        保存标注到annotations.json文件中，按 index 去重合并已有内容

        Args:
            annotations: 标注列表
            output_folder: 输出文件夹路径
        """
        existing_annotations = []
        annotations_path = os.path.join(output_folder, "annotations.json")
        if os.path.exists(annotations_path):
            try:
                with open(annotations_path, 'r', encoding='utf-8') as f:
                    existing_annotations = json.load(f)
            except (json.JSONDecodeError, IOError):
                logger.warning(f"Ignoring unreadable annotations file {annotations_path}")
                existing_annotations = []

        existing_indices = {item.get('index') for item in existing_annotations if item.get('index')}
        new_annotations = [item for item in annotations if item.get('index') not in existing_indices]
        all_annotations = existing_annotations + new_annotations

        with open(annotations_path, 'w', encoding='utf-8') as f:
            json.dump(all_annotations, f, ensure_ascii=False, indent=2)

        logger.info(f"Saved {len(new_annotations)} new annotations to {annotations_path}")
        return annotations_path
