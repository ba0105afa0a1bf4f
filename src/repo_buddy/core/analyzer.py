"""ProjectAnalyzer: walks a repository and builds its convention profile.

Per file, on a worker thread:
    read -> heuristics -> merge -> parse -> language analysis -> merge

Unreadable, unsupported and unparsable files drop out of the stages they
cannot take part in. Any other exception is contained to its file, so one
bad input never aborts the run.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional, Union

import tree_sitter

from ..analyzers import build_all_analyzers, get_analyzer
from ..casing import classify_casing
from ..config import AnalysisConfig
from ..environment import discover_files
from ..exceptions import FileAccessError, InvalidPathError, LLMError, ParsingError
from ..heuristics import analyze_heuristics
from ..llm import GeminiClient
from ..logging_config import get_logger
from ..models import AnalysisResult, FileFindings
from ..scanning.languages import Language, detect_language
from ..scanning.treesitter_parser import CodeParser, grammar_for
from .aggregator import ResultAggregator

logger = get_logger(__name__)

PathLike = Union[str, Path]


class ProjectAnalyzer:
    """Analysis orchestrator for one repository root.

    Example:
        analyzer = ProjectAnalyzer("/path/to/repo", load_config(workers=4))
        result = analyzer.analyze()
        result.language_counts
        {'Go': 12, 'Python': 3}
    """

    def __init__(self, root: PathLike, config: Optional[AnalysisConfig] = None, llm_client=None):
        """
        Args:
            root: Repository root directory
            config: Analysis settings (defaults used when omitted)
            llm_client: Object with summarize(result) -> str; built from
                config when with_llm is enabled and none is given

        Raises:
            InvalidPathError: If root is missing or not a directory
        """
        root_path = Path(root).resolve()
        if not root_path.exists():
            raise InvalidPathError(root_path, "path does not exist")
        if not root_path.is_dir():
            raise InvalidPathError(root_path, "not a directory")

        self.root = root_path
        self.config = config or AnalysisConfig()
        self._llm_client = llm_client

    def analyze(self, progress=None) -> AnalysisResult:
        """Analyze every discovered file and return the finalized result.

        Args:
            progress: Optional rich Progress to report per-file completion

        Raises:
            QueryDefinitionError: If an analyzer's queries fail to compile
        """
        # Compile all queries up front so a broken query fails the run
        # instead of being contained as a per-file error.
        build_all_analyzers()

        files = discover_files(
            self.root,
            include_hidden=self.config.include_hidden,
            skip_dirs=self.config.skip_dirs,
        )
        workers = self.config.effective_workers
        logger.info(f"Analyzing {len(files)} files in {self.root} with {workers} workers")

        task = None
        if progress is not None:
            task = progress.add_task("[cyan]Analyzing files...", total=len(files))

        aggregator = ResultAggregator(deterministic=self.config.deterministic)
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self._analyze_file_safely, rel, aggregator): rel for rel in files}
            for future in as_completed(futures):
                future.result()
                if task is not None:
                    progress.advance(task)

        result = aggregator.finalize()
        stats = result.stats
        logger.info(
            f"Visited {stats.files_visited} files: {stats.files_parsed} parsed, "
            f"{stats.files_unsupported} without grammar, {stats.files_parse_failed} unparsable, "
            f"{stats.files_unreadable} unreadable, {stats.files_failed} failed"
        )

        if self.config.with_llm:
            result.llm_summary = self._summarize(result)
        return result

    # ── Per-file stages ────────────────────────────────────────

    def read_source(self, rel_path: PathLike) -> str:
        """Read a file as text, replacing undecodable bytes.

        Raises:
            FileAccessError: If the file can't be read or exceeds max_file_size_mb
        """
        path = self.root / rel_path
        try:
            size = path.stat().st_size
            if size > self.config.max_file_size_bytes:
                raise FileAccessError(path, f"file too large ({size} bytes)")
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise FileAccessError(path, str(e)) from e

    def analyze_heuristics(self, rel_path: PathLike, source: str) -> FileFindings:
        return analyze_heuristics(rel_path, source)

    def try_parse(self, rel_path: PathLike, source: str) -> Optional[tree_sitter.Tree]:
        """Parse a file, or return None when no grammar applies or parsing fails."""
        parser = CodeParser.for_path(rel_path)
        if parser is None:
            return None
        try:
            return parser.parse(source)
        except ParsingError as e:
            logger.debug(str(e))
            return None

    def analyze_tree(
        self, rel_path: PathLike, source: str, tree: tree_sitter.Tree, language: Language
    ) -> FileFindings:
        """Run the language analyzer and record the file-name casing."""
        analyzer = get_analyzer(language, grammar_for(language, rel_path))
        findings = analyzer.analyze(source, tree)
        findings.naming.file_naming = classify_casing(Path(rel_path).stem)
        return findings

    # ── Internals ──────────────────────────────────────────────

    def _analyze_file_safely(self, rel_path: Path, aggregator: ResultAggregator) -> None:
        try:
            self._analyze_file(rel_path, aggregator)
        except Exception as e:
            logger.debug(f"Error analyzing {rel_path}: {e}")
            aggregator.count("files_failed")

    def _analyze_file(self, rel_path: Path, aggregator: ResultAggregator) -> None:
        key = rel_path.as_posix()
        aggregator.count("files_visited")

        try:
            source = self.read_source(rel_path)
        except FileAccessError as e:
            logger.debug(str(e))
            aggregator.count("files_unreadable")
            return

        aggregator.merge(key, self.analyze_heuristics(rel_path, source))

        language = detect_language(rel_path)
        if language is None:
            aggregator.count("files_unsupported")
            return

        tree = self.try_parse(rel_path, source)
        if tree is None:
            aggregator.count("files_parse_failed")
            return

        findings = self.analyze_tree(rel_path, source, tree, language)
        aggregator.merge(key, findings, language=language.display_name)
        aggregator.count("files_parsed")

    def _summarize(self, result: AnalysisResult) -> Optional[str]:
        if self._llm_client is not None:
            client = self._llm_client
            owned = False
        else:
            try:
                client = GeminiClient.from_config(self.config)
            except LLMError as e:
                logger.warning(f"LLM summary unavailable: {e}")
                return None
            owned = True

        try:
            return client.summarize(result)
        except LLMError as e:
            logger.warning(f"LLM summary unavailable: {e}")
            return None
        finally:
            if owned:
                client.close()
