"""A multi-threaded crawler that reports links which cannot be fetched."""

from __future__ import annotations

import ipaddress
import queue
import sys
import threading
from dataclasses import dataclass, field
from pprint import pformat
from typing import Optional
from urllib.parse import urljoin, urlsplit

import requests
from bs4 import BeautifulSoup


class BadResponse(Exception):
    """The server answered with a status that is not a success."""

    def __init__(self, status: str) -> None:
        super().__init__(f"bad http response: {status}")
        self.status = status


@dataclass(frozen=True)
class CrawlCommand:
    url: str
    extract_links: bool


def _domain(url: str) -> Optional[str]:
    host = urlsplit(url).hostname
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def visit_page(session: requests.Session, command: CrawlCommand) -> list[str]:
    """Fetch a page and return the absolute URLs of its links, if wanted."""
    print(f"Checking {command.url}")
    response = session.get(command.url)
    if not response.ok:
        raise BadResponse(f"{response.status_code} {response.reason}".strip())
    if not command.extract_links:
        return []

    base_url = response.url
    document = BeautifulSoup(response.text, "html.parser")
    links = []
    for anchor in document.find_all("a", href=True):
        href = anchor["href"]
        try:
            links.append(urljoin(base_url, href))
        except ValueError as error:
            print(f"On {base_url}: ignored unparsable {href!r}: {error}")
    return links


@dataclass
class CrawlState:
    start_url: str
    domain: str = field(init=False)
    visited_pages: set[str] = field(init=False)

    def __post_init__(self) -> None:
        domain = _domain(self.start_url)
        if domain is None:
            raise ValueError(f"start URL has no domain: {self.start_url!r}")
        self.domain = domain
        self.visited_pages = {self.start_url}

    def should_extract_links(self, url: str) -> bool:
        """Links are only followed on pages in the start URL's domain."""
        return _domain(url) == self.domain

    def mark_visited(self, url: str) -> bool:
        """Mark a page visited; return False if it already was."""
        if url in self.visited_pages:
            return False
        self.visited_pages.add(url)
        return True


@dataclass(frozen=True)
class _CrawlResult:
    url: str
    links: list[str]
    error: Optional[Exception] = None


def _crawl(commands: queue.Queue, results: queue.Queue) -> None:
    with requests.Session() as session:
        while True:
            command = commands.get()
            if command is None:
                return
            try:
                links = visit_page(session, command)
            except Exception as error:  # reported to the controller as a bad URL
                results.put(_CrawlResult(command.url, [], error))
            else:
                results.put(_CrawlResult(command.url, links))


def check_links(start_url: str, thread_count: int = 16) -> list[str]:
    """Crawl from ``start_url`` and return the URLs that could not be fetched."""
    if thread_count < 1:
        raise ValueError("thread_count must be at least 1")
    state = CrawlState(start_url)
    commands: queue.Queue = queue.Queue()
    results: queue.Queue = queue.Queue()
    workers = [
        threading.Thread(target=_crawl, args=(commands, results), daemon=True)
        for _ in range(thread_count)
    ]
    for worker in workers:
        worker.start()

    bad_urls: list[str] = []
    try:
        commands.put(CrawlCommand(start_url, True))
        pending = 1
        while pending:
            result = results.get()
            pending -= 1
            if result.error is not None:
                bad_urls.append(result.url)
                print(f"Got crawling error: {result.error}")
                continue
            for url in result.links:
                if state.mark_visited(url):
                    commands.put(CrawlCommand(url, state.should_extract_links(url)))
                    pending += 1
    finally:
        for _ in workers:
            commands.put(None)
    for worker in workers:
        worker.join()
    return bad_urls


def main(argv=None) -> None:
    args = sys.argv[1:] if argv is None else list(argv)
    start_url = args[0] if args else "https://www.google.org"
    bad_urls = check_links(start_url)
    print(f"Bad URLs: {pformat(bad_urls)}")


if __name__ == "__main__":
    main()