"""Disk Fragmenter: compact a disk map and compute its checksum."""

FREE = -1


def _create_file_system(text: str) -> tuple[list[int], int]:
    """Expand a dense disk map into blocks; return them and the largest file id."""
    blocks: list[int] = []
    file_id = 0
    for index, ch in enumerate(text):
        size = int(ch)
        if index % 2 == 0:
            blocks.extend([file_id] * size)
            file_id += 1
        else:
            blocks.extend([FREE] * size)
    return blocks, file_id - 1


def _checksum(blocks: list[int]) -> int:
    return sum(i * v for i, v in enumerate(blocks) if v > 0)


def _find_free_spot(blocks: list[int], before: int, length: int) -> int | None:
    run = 0
    for i, v in enumerate(blocks[:before]):
        if v == FREE:
            run += 1
            if run >= length:
                return i - length + 1
        else:
            run = 0
    return None


def _find_start_and_length(blocks: list[int], file_id: int) -> tuple[int, int] | None:
    try:
        start = blocks.index(file_id)
    except ValueError:
        return None
    end = start + 1
    while end < len(blocks) and blocks[end] == file_id:
        end += 1
    return start, end - start


def part1(text: str) -> int:
    blocks, _ = _create_file_system(text)
    i, j = 0, len(blocks) - 1
    while i < j:
        if blocks[i] != FREE:
            i += 1
        else:
            if blocks[j] != FREE:
                blocks[i], blocks[j] = blocks[j], blocks[i]
            j -= 1
    return _checksum(blocks)


def part2(text: str) -> int:
    blocks, largest = _create_file_system(text)
    for file_id in range(largest, -1, -1):
        found = _find_start_and_length(blocks, file_id)
        if found is None:
            continue
        start, length = found
        free = _find_free_spot(blocks, start, length)
        if free is not None:
            file_part = blocks[start : start + length]
            blocks[start : start + length] = blocks[free : free + length]
            blocks[free : free + length] = file_part
    return _checksum(blocks)