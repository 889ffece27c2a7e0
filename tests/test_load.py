import math

import pandas as pd

from core.load import SCHEMA, load_data, to_frame, to_records
from generate_data import generate, write


class TestToFrame:
    def test_renames_source_keys_and_fills_schema(self, tx):
        df = to_frame([{"customerEmail": "a@x.com", "discountAmount": "12.5"}])
        assert set(SCHEMA) <= set(df.columns)
        assert df.loc[0, "customer_email"] == "a@x.com"
        assert df.loc[0, "discount_amount"] == 12.5
        assert math.isnan(df.loc[0, "payment_value"])
        assert df.loc[0, "sold_by"] is None

    def test_non_numeric_becomes_missing(self, tx):
        df = to_frame([tx(paymentValue="n/a")])
        assert df["payment_value"].isna().all()

    def test_accepts_internal_columns(self):
        df = to_frame(pd.DataFrame({"discount_amount": [1.0], "sold_by": ["-"]}))
        assert df.loc[0, "sold_by"] == "-"

    def test_does_not_mutate_dataframe(self, tx):
        raw = pd.DataFrame([tx()])
        to_frame(raw)
        assert "customerEmail" in raw.columns

    def test_empty(self):
        assert to_frame([]).columns.tolist() == SCHEMA
        assert to_frame(None).empty


def test_to_records_round_keys(tx):
    rows = to_records(to_frame([tx(mrpPostTax=None)]))
    assert rows[0]["customerEmail"] == "ana@example.com"
    assert rows[0]["mrpPostTax"] is None


class TestLoadData:
    def test_missing_file_gives_empty_schema(self, tmp_path):
        data_dir, sales = load_data(tmp_path)
        assert data_dir == tmp_path
        assert sales.empty
        assert set(SCHEMA) <= set(sales.columns)

    def test_empty_file(self, tmp_path):
        from core.config import settings

        (tmp_path / settings.TRANSACTIONS_FILE).write_text("")
        _, sales = load_data(tmp_path)
        assert sales.empty

    def test_generated_dataset_round_trip(self, tmp_path):
        write(generate(n_rows=200, n_customers=40, days=60, bad_dates=3), tmp_path)
        _, sales = load_data(tmp_path)
        assert len(sales) == 200
        assert (sales["payment_date"] == "sin-fecha").sum() == 3
        assert (sales["sold_by"] == "-").any()
        assert sales["discount_amount"].notna().all()

    def test_numeric_codes_are_loaded_as_text(self, tmp_path):
        from core.config import settings
        from core.context import FilterSet
        from features.filters import apply_filters, filter_options

        pd.DataFrame([
            {"calculatedLocation": 101, "cleanedProduct": 5001, "discountAmount": 10, "paymentValue": 90},
            {"calculatedLocation": 102, "cleanedProduct": 5002, "discountAmount": 20, "paymentValue": 80},
        ]).to_csv(tmp_path / settings.TRANSACTIONS_FILE, index=False)
        _, sales = load_data(tmp_path)
        opts = filter_options(sales)
        assert opts["location"] == ["101", "102"]
        out = apply_filters(sales, FilterSet(location=opts["location"][1], product="5002"))
        assert out["discount_amount"].tolist() == [20.0]
