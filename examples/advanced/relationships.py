# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Many-to-many links and aggregation.

1. Creates a doctor and two clinics
2. Links the doctor to both clinics
3. Aggregates clinics per doctor
4. Unlinks every clinic (empty ``id_to``) and cleans up
"""

from ucode_sdk import Argument, ManyToManyRelation, UcodeClient


def main() -> None:
    with UcodeClient() as client:
        doctor = client.create_object(Argument("doctor", {"name": "Dr. Example"}))["data"]["guid"]
        clinics = [
            client.create_object(Argument("clinic", {"name": name}))["data"]["guid"]
            for name in ("North", "South")
        ]

        client.append_many_to_many(
            ManyToManyRelation(table_from="doctor", table_to="clinic", id_from=doctor, id_to=clinics)
        )

        stats = client.get_list_aggregation(
            Argument(
                "doctor",
                {
                    "pipelines": [
                        {"$match": {"guid": doctor}},
                        {"$project": {"name": 1, "clinics": {"$size": "$clinic_ids"}}},
                    ]
                },
            )
        )
        print(stats.value)

        # Empty id_to removes every link from this doctor
        client.delete_many_to_many(ManyToManyRelation("doctor", "clinic", doctor, []))

        client.multiple_delete(Argument("clinic", {"ids": clinics}))
        client.delete(Argument("doctor", {"guid": doctor}))


if __name__ == "__main__":
    main()
