from aicowork.cli.progress.rich import RichOperationProgress

__all__ = ["RichOperationProgress"]
