from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Archive:
    """Description of one compiled Go archive, as emitted for the packages driver."""
    id: str = ''
    pkg_path: str = ''
    export_file: str = ''
    go_files: List[str] = field(default_factory=list)
    compiled_go_files: List[str] = field(default_factory=list)
    other_files: List[str] = field(default_factory=list)
    # import path -> archive ID
    imports: Dict[str, str] = field(default_factory=dict)

    def to_json(self) -> Dict[str, Any]:
        """Return the wire representation, keys in their published order."""
        return {
            'ID': self.id,
            'PkgPath': self.pkg_path,
            'ExportFile': self.export_file,
            'GoFiles': list(self.go_files),
            'CompiledGoFiles': list(self.compiled_go_files),
            'OtherFiles': list(self.other_files),
            'Imports': dict(self.imports),
        }
