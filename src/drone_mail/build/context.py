from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

DRONE_PREFIX = "DRONE_"

# Field name -> variable suffix set by Drone for every pipeline step.
DRONE_VARIABLES = {
    "author": "COMMIT_AUTHOR",
    "author_email": "COMMIT_AUTHOR_EMAIL",
    "branch": "COMMIT_BRANCH",
    "build": "BUILD_NUMBER",
    "status": "JOB_STATUS",
    "started": "BUILD_STARTED",
    "finished": "BUILD_FINISHED",
    "link": "BUILD_LINK",
    "repo_name": "REPO",
    "repo_owner": "REPO_OWNER",
    "sha": "COMMIT_SHA",
    "commit_message": "COMMIT_MESSAGE",
    "commit_link": "COMMIT_LINK",
    "prev_build_status": "PREV_BUILD_STATUS",
}


@dataclass(frozen=True, slots=True)
class BuildContext:
    author: Optional[str] = None
    author_email: Optional[str] = None
    branch: Optional[str] = None
    build: Optional[str] = None
    status: Optional[str] = None
    started: Optional[str] = None
    finished: Optional[str] = None
    link: Optional[str] = None
    repo_name: Optional[str] = None
    repo_owner: Optional[str] = None
    sha: Optional[str] = None
    commit_message: Optional[str] = None
    commit_link: Optional[str] = None
    prev_build_status: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BuildContext":
        env = os.environ if environ is None else environ
        values = {
            field.name: env.get(DRONE_PREFIX + DRONE_VARIABLES[field.name])
            for field in fields(cls)
        }
        return cls(**values)
