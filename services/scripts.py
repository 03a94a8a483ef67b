"""
Script queue for rendered pages.

Observers enqueue scripts while a page renders; when the queue is printed
each script's default tag is passed through every registered tag rewriter.
"""

from dataclasses import dataclass, field
from typing import Optional

import structlog
from markupsafe import Markup, escape

logger = structlog.get_logger()


class PageRenderObserver:
    """Called once per page render, before scripts are printed."""

    def on_page_render(self, registry):
        raise NotImplementedError


class TagRewriter:
    """Called for every printed script tag. Must return the tag to print."""

    def rewrite_tag(self, tag, handle, src):
        raise NotImplementedError


@dataclass
class Script:
    handle: str
    src: str
    deps: list = field(default_factory=list)
    ver: Optional[str] = None
    in_footer: bool = False

    @property
    def url(self):
        if self.ver:
            return f'{self.src}?ver={self.ver}'
        return self.src


def default_tag(script):
    """Tag printed for a script before rewriters run."""
    return f"<script src='{escape(script.url)}' id='{escape(script.handle)}-js'></script>"


class ScriptRegistry:
    """Per-request queue of scripts plus the rewriters applied on output."""

    def __init__(self, rewriters=None):
        self._scripts = {}
        self._queue = []
        self._done = set()
        self.rewriters = list(rewriters or [])

    def register(self, handle, src, deps=None, ver=None, in_footer=False):
        if handle not in self._scripts:
            self._scripts[handle] = Script(handle, src, list(deps or []), ver, in_footer)
        return self._scripts[handle]

    def enqueue(self, handle, src=None, deps=None, ver=None, in_footer=False):
        """Queue a script for output, registering it first when src is given."""
        if src is not None:
            self.register(handle, src, deps, ver, in_footer)
        if handle not in self._scripts:
            logger.warning("Unknown script handle enqueued", handle=handle)
            return
        if handle not in self._queue:
            self._queue.append(handle)
            logger.debug("Script enqueued", handle=handle)

    def is_enqueued(self, handle):
        return handle in self._queue

    def render_tag(self, script):
        tag = default_tag(script)
        for rewriter in self.rewriters:
            tag = rewriter.rewrite_tag(tag, script.handle, script.src)
        return tag

    def _resolve(self, handle, order, seen):
        if handle in seen or handle not in self._scripts:
            return
        seen.add(handle)
        for dep in self._scripts[handle].deps:
            self._resolve(dep, order, seen)
        order.append(self._scripts[handle])

    def print_scripts(self, in_footer=False):
        """Render queued scripts for the head (default) or the footer."""
        order = []
        seen = set()
        for handle in self._queue:
            self._resolve(handle, order, seen)

        tags = []
        for script in order:
            if script.handle in self._done or script.in_footer != in_footer:
                continue
            self._done.add(script.handle)
            tags.append(self.render_tag(script))
        return Markup('\n'.join(tags))


def run_page_render(observers, registry):
    """Let every observer enqueue its scripts."""
    for observer in observers:
        observer.on_page_render(registry)
    return registry
