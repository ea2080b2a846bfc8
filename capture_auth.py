# capture_auth.py
"""
Log in to SauceDemo once and print what the captured session contains.

    python capture_auth.py                      # standard_user, headless
    python capture_auth.py --user locked_out_user
    python capture_auth.py --save /tmp/sauce.storage.json
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from playwright.sync_api import sync_playwright, TimeoutError as PlaywrightTimeoutError

import sauce_config
from auth_state import Credentials, capture_with_temporary_context
from site_probe import probe_site

logger = logging.getLogger(__name__)


def _parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Capture SauceDemo auth state")
    ap.add_argument("--url", default=sauce_config.SITE_URL)
    ap.add_argument("--user", default=sauce_config.USER)
    ap.add_argument("--password", default=sauce_config.PWD)
    ap.add_argument("--save", metavar="PATH", help="write Playwright storage_state JSON here")
    ap.add_argument("--headed", action="store_true")
    return ap.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    probe = probe_site(args.url)
    if not probe.ok:
        print(f"site unreachable: {args.url} ({probe.error})", file=sys.stderr)
        return 1
    print("site:", args.url, "status:", probe.status, "latency_ms:", probe.latency_ms)

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=sauce_config.HEADLESS and not args.headed)
        try:
            state = capture_with_temporary_context(
                browser, Credentials(args.user, args.password), args.url, base_url=args.url
            )
        except PlaywrightTimeoutError:
            logger.error("login as %s did not reach %s", args.user, sauce_config.INVENTORY_PATH)
            return 1
        finally:
            browser.close()

    # Print a tiny summary so you can verify
    for k, v in state.summary().items():
        print(f"{k}:", v)

    if args.save:
        path = Path(args.save)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(state.to_storage_state(args.url), ensure_ascii=False))
        print("saved_to:", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
