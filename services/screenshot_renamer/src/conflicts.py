"""Collision resolution for canonical screenshot names."""

from collections.abc import Iterable
from pathlib import PurePath


class FilenameConflictResolver:
    """Picks a free file name by appending a ``(n)`` counter before the extension.

    Comparison is case-insensitive, as on the filesystems screenshots are
    usually stored on.
    """

    def generate_unique_name(self, base_name: str, existing_files: Iterable[str]) -> str:
        """
        Generate a unique filename by appending numbers if necessary.

        Args:
            base_name: The filename to make unique
            existing_files: Filenames already present in the target directory

        Returns:
            ``base_name`` if free, otherwise ``"<stem> (n)<ext>"`` for the smallest free n

        Raises:
            ValueError: If base_name is empty
        """
        if not base_name:
            raise ValueError("Base name cannot be empty")

        existing_folded = {name.casefold() for name in existing_files if name}

        if base_name.casefold() not in existing_folded:
            return base_name

        path_obj = PurePath(base_name)
        name_part = path_obj.stem
        extension = path_obj.suffix

        # Pigeonhole: one of the first len(existing) + 1 counters must be free
        for counter in range(1, len(existing_folded) + 2):
            candidate = f"{name_part} ({counter}){extension}"
            if candidate.casefold() not in existing_folded:
                return candidate

        raise RuntimeError(f"No free name found for {base_name}")


_resolver = FilenameConflictResolver()


def resolve_collision(target_name: str, existing_names: Iterable[str]) -> str:
    """Convenience function to pick a collision-free name for ``target_name``."""
    return _resolver.generate_unique_name(target_name, existing_names)
