# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Quickstart: create, read, list, update and delete objects.

Requires ``UCODE_APP_ID`` in the environment (or a ``.env`` file) and an
existing table with slug ``order`` that has a ``title`` field.
"""

import logging

from ucode_sdk import Argument, ArgumentWithPagination, HttpError, UcodeClient

logging.basicConfig(level=logging.INFO)
logging.getLogger("ucode_sdk").setLevel(logging.DEBUG)
logger = logging.getLogger(__name__)


def log_call(call: str) -> None:
    logger.info("calling %s", call)


def main() -> None:
    with UcodeClient() as client:
        log_call("create_object")
        created = client.create_object(Argument("order", {"title": "Quickstart order"}, disable_faas=True))
        guid = created["data"]["guid"]
        print(f"Created order {guid} (HTTP {created.response.status_code})")

        log_call("get_single")
        single = client.get_single(Argument("order", {"guid": guid}))
        print(single["data"]["response"])

        log_call("get_list")
        page = client.get_list(ArgumentWithPagination("order", {}, limit=5, page=1))
        print(f"{page['data']['count']} orders in total, first page:")
        for row in page["data"]["response"]:
            print(f"  {row.get('guid')}: {row.get('title')}")

        log_call("update_object")
        client.update_object(Argument("order", {"guid": guid, "title": "Quickstart order (edited)"}))

        log_call("delete")
        try:
            client.delete(Argument("order", {"guid": guid}, disable_faas=True))
        except HttpError as ex:
            print(f"Delete failed: {ex.to_dict()}")
            raise
        print("Done.")


if __name__ == "__main__":
    main()
