"""UI-layer services (invoked by CLI flows)."""

from lr_ui.services.output_paths import obfuscated_output_path

__all__ = ["obfuscated_output_path"]
