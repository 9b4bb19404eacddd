import sys
from typing import Dict, Any, List
from langgraph.graph import StateGraph, END
from .state import ConformerState
from ..core.errors import DirectoryOpenError
from ..core.filesystem import FileSystemManager
from ..core.logger import ConformerLogger
from ..core.normalize import EpisodeNormalizer
from ..core.schema_internal import RenameConfig


class EpisodeConformerGraph:
    def __init__(self, config: RenameConfig):
        self.config = config

        # Initialize logger
        self.logger = ConformerLogger(
            log_dir=config.log_dir,
            log_level="DEBUG",
            verbose=config.verbose,
            quiet=config.quiet
        )

    def create_graph(self) -> StateGraph:
        """Create the LangGraph workflow."""
        workflow = StateGraph(ConformerState)

        # Add nodes
        workflow.add_node("parse_input", self.parse_input_node)
        workflow.add_node("list_directory", self.list_directory_node)
        workflow.add_node("process_entries", self.process_entries_node)
        workflow.add_node("report", self.report_node)

        # Define edges
        workflow.set_entry_point("parse_input")
        workflow.add_edge("parse_input", "list_directory")
        workflow.add_conditional_edges(
            "list_directory",
            self.route_after_listing,
            {"process": "process_entries", "report": "report"}
        )
        workflow.add_edge("process_entries", "report")
        workflow.add_edge("report", END)

        return workflow

    def initial_state(self) -> ConformerState:
        return ConformerState(config=self.config)

    def parse_input_node(self, state: ConformerState) -> Dict[str, Any]:
        """Record the run configuration."""
        self.logger.log_input(state.config.model_dump())
        return {"config": state.config}

    def list_directory_node(self, state: ConformerState) -> Dict[str, Any]:
        """Read and sort the directory entries.

        An unreadable directory is reported on standard output and ends the
        run normally. DirectoryEntryError is not caught here.
        """
        path = state.config.path
        try:
            entries = FileSystemManager.list_directory(path)
        except DirectoryOpenError as e:
            message = f"Error: reading dir: {e}"
            self.logger.log_error(message, stream=sys.stdout)
            return {"entries": [], "listing_failed": True, "errors": state.errors + [message]}

        # A log directory placed inside the target is not an episode.
        entries = [entry for entry in entries if not self.logger.owns_path(entry)]
        self.logger.log_listing(path, entries)
        return {"entries": entries, "listing_failed": False}

    def route_after_listing(self, state: ConformerState) -> str:
        return "report" if state.listing_failed else "process"

    def process_entries_node(self, state: ConformerState) -> Dict[str, Any]:
        """Print, preview or rename every entry in sorted order.

        A SelectionError aborts the run at the offending file; files handled
        before it keep their new names.
        """
        config = state.config
        results: List[Dict[str, Any]] = []
        errors = list(state.errors)

        for entry in state.entries:
            numbers = EpisodeNormalizer.find_all_numbers(entry)

            if config.list_numbers:
                print(EpisodeNormalizer.format_numbers(numbers))
                result = {"entry": entry, "numbers": numbers, "status": "listed"}
                self.logger.log_entry(result)
                results.append(result)
                continue

            number = EpisodeNormalizer.select_number(numbers, config.selected_index, entry)
            target = EpisodeNormalizer.format_title(
                EpisodeNormalizer.get_file_extension(entry), number, config
            )
            result = {"entry": entry, "numbers": numbers, "number": number, "target": target}

            if config.dry_run:
                print(target)
                result["status"] = "previewed"
            else:
                try:
                    FileSystemManager.rename_file(entry, target)
                    result["status"] = "renamed"
                except OSError as e:
                    message = f"Error renaming file: {e}"
                    self.logger.log_error(message)
                    errors.append(message)
                    result["status"] = "failed"
                    result["error"] = str(e)

            self.logger.log_entry(result)
            results.append(result)

        return {"results": results, "errors": errors}

    def report_node(self, state: ConformerState) -> Dict[str, Any]:
        """Summarize the run and finalize logging."""
        statuses = [result.get("status") for result in state.results]
        summary = {
            "entries": len(state.entries),
            "listed": statuses.count("listed"),
            "previewed": statuses.count("previewed"),
            "renamed": statuses.count("renamed"),
            "failed": statuses.count("failed"),
        }
        self.logger.log_summary(summary)

        config = state.config
        if not state.listing_failed and not config.list_numbers and not config.dry_run:
            self.logger.log_info(f"Renamed {summary['renamed']} of {summary['entries']} files")
        elif not state.listing_failed:
            self.logger.log_info(f"Processed {summary['entries']} entries", level="verbose")

        if self.logger.log_file is not None:
            self.logger.log_info(f"Log file: {self.logger.log_file}", level="verbose")
        log_file = self.logger.finalize()

        return {"summary": summary, "log_file": log_file}
