"""AST-based codebase model loader.

Implements ModelLoaderPort by scanning a source tree with Python `ast`.
Arena-style: all units are allocated first, references are then linked
by name lookup, and the resulting model is never mutated.

FAIL-FIRST: raises LoadError on any loading issue.
"""

from __future__ import annotations

import ast
import logging
from dataclasses import dataclass
from pathlib import Path

from layercheck.domain.exceptions import LoadError
from layercheck.domain.model.codebase import CodebaseModel
from layercheck.domain.model.configuration import DEFAULT_EXCLUDES
from layercheck.domain.model.enums import UnitKind
from layercheck.domain.model.location import Location
from layercheck.domain.model.unit import Unit
from layercheck.domain.ports.model_loader import ModelLoaderPort
from layercheck.infrastructure.analyzers.base import compute_module_name, make_location
from layercheck.infrastructure.analyzers.import_analyzer import ImportAnalyzer
from layercheck.infrastructure.analyzers.reference_analyzer import ReferenceAnalyzer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _RawUnit:
    """Unit before reference linking: names as written in source."""

    qualified_name: str
    package: str
    simple_name: str
    kind: UnitKind
    resolved: frozenset[str]
    location: Location


class ASTModelLoader(ModelLoaderPort):
    """Loader using Python AST to build the codebase model.

    Stateless between load() calls.

    Example:
        loader = ASTModelLoader()
        model = loader.load(Path("src"), "ms_template")
    """

    def __init__(self, *, exclude: frozenset[str] = DEFAULT_EXCLUDES) -> None:
        """Initialize loader.

        Args:
            exclude: Directory names to skip while scanning
        """
        if exclude is None:
            raise TypeError("exclude must not be None")

        self._exclude = exclude
        self._import_analyzer = ImportAnalyzer()
        self._reference_analyzer = ReferenceAnalyzer()

    def load(self, root_path: Path, package_filter: str) -> CodebaseModel:
        """Load all units under package_filter found below root_path.

        Args:
            root_path: Import root (module names are computed relative to it)
            package_filter: Package prefix; units named exactly so or
                below it (dot boundary) are kept

        Returns:
            Immutable, non-empty CodebaseModel

        Raises:
            ValueError: If package_filter is empty
            LoadError: Root missing/unreadable, unparsable file, or no units
        """
        if not package_filter:
            raise ValueError("package_filter must not be empty")

        root_path = Path(root_path)
        if not root_path.exists():
            raise LoadError(root_path, "path does not exist")
        if not root_path.is_dir():
            raise LoadError(root_path, "not a directory")

        logger.debug("scanning %s for package %s", root_path, package_filter)

        files = self._find_modules(root_path)
        all_modules = frozenset(files)
        selected = {
            name: path for name, path in files.items() if _under(name, package_filter)
        }

        raw_units: list[_RawUnit] = []
        for module_name in sorted(selected):
            raw_units.extend(self._analyze_file(selected[module_name], module_name))

        if not raw_units:
            raise LoadError(root_path, f"no units found under package '{package_filter}'")

        units = _link(raw_units, all_modules)

        logger.debug(
            "loaded %d unit(s) from %d module(s) under %s",
            len(units),
            len(selected),
            package_filter,
        )

        return CodebaseModel.from_units(
            units,
            root_path=root_path,
            package_filter=package_filter,
        )

    # =========================================================================
    # Scanning
    # =========================================================================

    def _find_modules(self, root_path: Path) -> dict[str, Path]:
        """Map module name → file for every importable .py file (sorted walk).

        Symlinked directories are not followed, as with Path.rglob.
        """
        result: dict[str, Path] = {}
        stack = [root_path]

        while stack:
            directory = stack.pop()
            try:
                entries = sorted(directory.iterdir())
            except PermissionError as e:
                raise LoadError(directory, "permission denied") from e
            except OSError as e:
                raise LoadError(directory, f"cannot read directory: {e}") from e

            for entry in reversed(entries):
                if entry.is_dir():
                    if entry.is_symlink():
                        logger.debug("skipping symlinked directory %s", entry)
                        continue
                    if entry.name in self._exclude:
                        logger.debug("skipping excluded directory %s", entry)
                        continue
                    stack.append(entry)
                elif entry.is_file() and entry.suffix == ".py":
                    module_name = compute_module_name(entry, root_path)
                    if module_name is None:
                        logger.debug("skipping non-importable file %s", entry)
                        continue
                    result[module_name] = entry

        return result

    def _analyze_file(self, path: Path, module_name: str) -> list[_RawUnit]:
        """Parse one module into raw module + class units."""
        tree = _parse(path)
        is_package = path.name == "__init__.py"

        try:
            symbols = self._import_analyzer.analyze(tree, module_name, is_package=is_package)
        except ValueError as e:
            raise LoadError(path, str(e)) from e

        def resolve(names: frozenset[str]) -> frozenset[str]:
            resolved = (symbols.resolve(name) for name in names)
            return frozenset(r for r in resolved if r is not None)

        units = [
            _RawUnit(
                qualified_name=module_name,
                package=module_name,
                simple_name=module_name.rsplit(".", 1)[-1],
                kind=UnitKind.MODULE,
                resolved=resolve(self._reference_analyzer.analyze_module(tree)),
                location=Location(file=path, line=1, column=0),
            )
        ]

        for qualified_name, node in _iter_classes(tree.body, module_name):
            units.append(
                _RawUnit(
                    qualified_name=qualified_name,
                    package=module_name,
                    simple_name=node.name,
                    kind=UnitKind.CLASS,
                    resolved=resolve(self._reference_analyzer.analyze_class(node)),
                    location=make_location(node, path),
                )
            )

        return units


def load_model(
    root_path: Path,
    package_filter: str,
    *,
    exclude: frozenset[str] = DEFAULT_EXCLUDES,
) -> CodebaseModel:
    """Load codebase model with a fresh ASTModelLoader.

    See ASTModelLoader.load for arguments and errors.
    """
    return ASTModelLoader(exclude=exclude).load(root_path, package_filter)


def _parse(path: Path) -> ast.Module:
    """Read and parse source file. FAIL-FIRST on file and syntax errors."""
    try:
        source = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise LoadError(path, "permission denied") from e
    except UnicodeDecodeError as e:
        raise LoadError(path, f"encoding error: {e}") from e
    except OSError as e:
        raise LoadError(path, f"cannot read file: {e}") from e

    try:
        return ast.parse(source, filename=str(path))
    except SyntaxError as e:
        raise LoadError(path, f"syntax error: {e}") from e


def _iter_classes(body: list[ast.stmt], prefix: str) -> list[tuple[str, ast.ClassDef]]:
    """Classes defined at module/class level, nested ones included.

    Classes under if/try/with blocks count; classes inside functions do not
    (they belong to the enclosing unit).
    """
    found: list[tuple[str, ast.ClassDef]] = []

    for node in body:
        match node:
            case ast.ClassDef(name=name, body=class_body):
                qualified_name = f"{prefix}.{name}"
                found.append((qualified_name, node))
                found.extend(_iter_classes(class_body, qualified_name))
            case ast.FunctionDef() | ast.AsyncFunctionDef():
                pass
            case ast.If() | ast.Try() | ast.TryStar() | ast.With() | ast.AsyncWith():
                for block in _blocks(node):
                    found.extend(_iter_classes(block, prefix))

    return found


def _blocks(node: ast.stmt) -> list[list[ast.stmt]]:
    """Statement lists nested directly in a compound statement."""
    match node:
        case ast.If(body=body, orelse=orelse):
            return [body, orelse]
        case ast.Try(body=body, handlers=handlers, orelse=orelse, finalbody=finalbody) | ast.TryStar(
            body=body, handlers=handlers, orelse=orelse, finalbody=finalbody
        ):
            return [body, *(h.body for h in handlers), orelse, finalbody]
        case ast.With(body=body) | ast.AsyncWith(body=body):
            return [body]
    return []


def _under(name: str, package_filter: str) -> bool:
    """True if name is package_filter itself or below it (dot boundary)."""
    return name == package_filter or name.startswith(package_filter + ".")


def _link(raw_units: list[_RawUnit], all_modules: frozenset[str]) -> list[Unit]:
    """Normalize resolved names to unit names and build final units."""
    known_units = frozenset(raw.qualified_name for raw in raw_units)

    units: list[Unit] = []
    for raw in raw_units:
        references = {
            _normalize(name, known_units, all_modules) for name in raw.resolved
        }
        own_prefix = raw.qualified_name + "."
        references = {
            ref
            for ref in references
            if ref != raw.qualified_name and not ref.startswith(own_prefix)
        }
        units.append(
            Unit(
                qualified_name=raw.qualified_name,
                package=raw.package,
                simple_name=raw.simple_name,
                kind=raw.kind,
                references=frozenset(references),
                location=raw.location,
            )
        )
    return units


def _normalize(name: str, known_units: frozenset[str], all_modules: frozenset[str]) -> str:
    """Map resolved dotted name to the unit it refers to.

    Longest prefix that is a unit wins. A prefix that is a module (but
    not a unit of the model) keeps one more segment: module.attribute.
    External names are kept as resolved.

    Examples:
        pkg.repo.orders.OrderRepository.find → pkg.repo.orders.OrderRepository
        pkg.repo.orders.find_all             → pkg.repo.orders.find_all
        sqlalchemy.orm.Session               → sqlalchemy.orm.Session
    """
    parts = name.split(".")
    for end in range(len(parts), 0, -1):
        prefix = ".".join(parts[:end])
        if prefix in known_units:
            if end < len(parts) and prefix in all_modules:
                attribute = ".".join(parts[: end + 1])
                return attribute if attribute not in known_units else prefix
            return prefix
        if prefix in all_modules:
            return ".".join(parts[: end + 1])
    return name
