from dataclasses import dataclass, field
from typing import List, Optional

FILE_TYPES = {
    "video": ["mp4","webm","mov","mkv"],
    "image": ["jpg","jpeg","png","gif","webp"],
    "text": ["txt","md"],
}

UNKNOWN = "unknown"

# Sentinel names inside the content tree
FINAL_DIR = "Final"
TAGS_FILE = "tags.txt"

@dataclass
class FileEntry:
    name: str
    path: str
    type: str
    date: str

@dataclass
class Preview:
    path: str
    date: str

@dataclass
class Category:
    name: str
    preview: Optional[str] = None
    date: Optional[str] = None

@dataclass
class Project:
    name: str
    files: List[FileEntry] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
