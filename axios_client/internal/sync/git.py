"""Синхронизация директории с TypeScript клиентом с git репозиторием"""

import logging
import os
import stat
import tempfile
import weakref
from typing import Optional

from git import GitCommandError, InvalidGitRepositoryError, Repo
from git.exc import NoSuchPathError

from ..exc import GitSyncError
from ..generator.templates import templates

logger = logging.getLogger(__name__)

# git вызывает GIT_ASKPASS с текстом запроса в $1 и читает ответ из stdout
ASKPASS_SCRIPT = """#!/bin/sh
case "$1" in
    Username*) printf '%s\\n' "$GIT_USERNAME" ;;
    *) printf '%s\\n' "$GIT_PASSWORD" ;;
esac
"""


class GitSynchronizer:
    """pull/clone перед генерацией, add/commit/push после.

    Ошибки git логируются и не пробрасываются: клиент уже сгенерирован.
    """

    def __init__(
        self,
        directory: str,
        remote_url: Optional[str] = None,
        username: Optional[str] = None,
        token: Optional[str] = None,
    ):
        self.directory = directory
        self.remote_url = remote_url
        self.username = username
        self.token = token
        self.repo: Optional[Repo] = None
        self._askpass: Optional[str] = None

    @property
    def askpass(self) -> str:
        """Путь к askpass скрипту, отдающему логин и токен; удаляется вместе с объектом"""
        if self._askpass is None:
            fd, path = tempfile.mkstemp(prefix="axios-client-askpass-", suffix=".sh")
            with os.fdopen(fd, "w") as f:
                f.write(ASKPASS_SCRIPT)
            os.chmod(path, stat.S_IRWXU)
            weakref.finalize(self, os.remove, path)
            self._askpass = path
        return self._askpass

    @property
    def env(self) -> dict:
        env = {}
        if self.token:
            env.update(
                {
                    "GIT_ASKPASS": self.askpass,
                    "GIT_TERMINAL_PROMPT": "0",
                    "GIT_USERNAME": self.username or "oauth2",
                    "GIT_PASSWORD": self.token,
                }
            )
        return env

    def prepare(self) -> bool:
        """Открыть существующий репозиторий и сделать pull, иначе clone"""
        try:
            self.repo = self._open_or_clone()
            return True
        except GitSyncError as e:
            logger.error("Git %s failed: %s", e.operation, e)
            return False

    def sync(self, message: str = templates.commit_message) -> bool:
        """add + commit + push. False если что-то пошло не так"""
        try:
            if self.repo is None:
                self.repo = self._open_or_clone()
            self.add_changes()
            if not self.commit_changes(message):
                return True
            self.push_changes()
            return True
        except GitSyncError as e:
            logger.error("Git %s failed: %s", e.operation, e)
            return False

    def _open_or_clone(self) -> Repo:
        if os.path.isdir(os.path.join(self.directory, ".git")):
            logger.info("Opening existing repository %s", self.directory)
            try:
                repo = Repo(self.directory)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise GitSyncError(str(e), operation="open") from e

            if self.remote_url and "origin" in repo.remotes:
                try:
                    with repo.git.custom_environment(**self.env):
                        repo.remotes.origin.pull()
                except GitCommandError as e:
                    raise GitSyncError(str(e), operation="pull") from e
                logger.info("Repository updated")
            return repo

        if not self.remote_url:
            raise GitSyncError(
                f"{self.directory} is not a repository and no remote is set",
                operation="open",
            )

        logger.info("Cloning %s into %s", self.remote_url, self.directory)
        try:
            env = {**os.environ, **self.env}
            return Repo.clone_from(self.remote_url, self.directory, env=env)
        except GitCommandError as e:
            raise GitSyncError(str(e), operation="clone") from e

    def add_changes(self):
        try:
            self.repo.git.add(A=True)
        except GitCommandError as e:
            raise GitSyncError(str(e), operation="add") from e
        logger.info("Changes added")

    def commit_changes(self, message: str) -> bool:
        try:
            if self.repo.head.is_valid() and not self.repo.is_dirty(
                index=True, working_tree=False, untracked_files=False
            ):
                logger.info("No changes to commit")
                return False

            commit = self.repo.index.commit(message)
        except (GitCommandError, ValueError) as e:
            raise GitSyncError(str(e), operation="commit") from e
        logger.info("Created commit %s - %s", commit.hexsha[:8], message)
        return True

    def push_changes(self):
        if "origin" not in self.repo.remotes:
            logger.info("No origin remote, skipping push")
            return

        try:
            with self.repo.git.custom_environment(**self.env):
                results = self.repo.remotes.origin.push()
        except GitCommandError as e:
            raise GitSyncError(str(e), operation="push") from e

        for result in results:
            logger.info("Pushed %s", result.summary.strip())
