"""Builders for aggregate response payloads shared across tests."""


def make_point(*int_vals):
    return {
        "dataTypeName": "com.google.step_count.delta",
        "startTimeNanos": "1710000000000000000",
        "endTimeNanos": "1710000060000000000",
        "value": [{"intVal": v, "mapVal": []} for v in int_vals],
    }


def make_response(*points):
    return {
        "bucket": [
            {
                "startTimeMillis": "1710000000000",
                "endTimeMillis": "1710003600000",
                "dataset": [
                    {
                        "dataSourceId": "derived:com.google.step_count.delta:com.google.android.gms:aggregated",
                        "point": list(points),
                    }
                ],
            }
        ]
    }
