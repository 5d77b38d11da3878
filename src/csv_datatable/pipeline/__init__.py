"""
Pipeline Package - Orchestration and Interaction State.

Components:
    - TablePipeline: Shared parse / filter / sort orchestration
    - TableSession: Per-instance state deciding when stages run

Design Principles:
    - One pipeline shared by every presentation adapter
    - Stateless stages, state kept in the session
    - All recomputation is synchronous and bounded by the row count
"""

from csv_datatable.pipeline.table_pipeline import TablePipeline
from csv_datatable.pipeline.table_session import TableSession

__all__ = ["TablePipeline", "TableSession"]
