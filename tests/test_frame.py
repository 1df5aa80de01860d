import pytest

from mlopskit.frame import (
    COUNTRY_COLUMN,
    main,
    print_df,
    print_schema,
    print_shape,
    read_csv,
    sort_by_year,
)

CSV_TEXT = (
    "Country Name,Country Code,2019,2020\n"
    "Aland,AAA,71.5,72.25\n"
    "Borduria,BBB,80.5,\n"
    "Carpania,CCC,65.0,60.5\n"
    "Dorland,DDD,75.75,78.5\n"
)


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "life.csv"
    path.write_text(CSV_TEXT)
    return str(path)


def test_read_csv_keeps_header_and_rows(csv_path):
    df = read_csv(csv_path)
    assert list(df.columns) == ["Country Name", "Country Code", "2019", "2020"]
    assert list(df[COUNTRY_COLUMN]) == ["Aland", "Borduria", "Carpania", "Dorland"]


def test_sort_descending_drops_nulls(csv_path):
    result = sort_by_year(read_csv(csv_path), "2020", True)
    assert list(result.columns) == [COUNTRY_COLUMN, "2020"]
    assert "Borduria" not in list(result[COUNTRY_COLUMN])
    values = list(result["2020"])
    assert values == sorted(values, reverse=True)
    assert len(result) == 3


def test_sort_ascending_is_reverse_of_descending(csv_path):
    df = read_csv(csv_path)
    up = list(sort_by_year(df, "2019", False)[COUNTRY_COLUMN])
    down = list(sort_by_year(df, "2019", True)[COUNTRY_COLUMN])
    assert up == list(reversed(down))
    assert len(up) == 4


def test_sort_unknown_year_raises(csv_path):
    with pytest.raises(KeyError):
        sort_by_year(read_csv(csv_path), "1900", True)


def test_print_shape(csv_path, capsys):
    print_shape(read_csv(csv_path))
    assert capsys.readouterr().out.strip() == "(4, 4)"


def test_print_schema_lists_every_column(csv_path, capsys):
    print_schema(read_csv(csv_path))
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":")[0] for line in lines] == [
        "Country Name",
        "Country Code",
        "2019",
        "2020",
    ]


def test_print_df_limits_rows(csv_path, capsys):
    print_df(read_csv(csv_path), 2)
    out = capsys.readouterr().out
    assert "Aland" in out and "Borduria" in out
    assert "Carpania" not in out


def test_main_print_rows(csv_path, capsys):
    assert main(["print", "--path", csv_path, "--rows", "1"]) == 0
    out = capsys.readouterr().out
    assert "Aland" in out
    assert "Dorland" not in out


def test_main_sort_top_row(csv_path, capsys):
    assert main(["sort", "--path", csv_path, "--year", "2020", "--rows", "1"]) == 0
    out = capsys.readouterr().out
    assert "Dorland" in out
    assert "Aland" not in out


def test_main_sort_rejects_bad_order(csv_path):
    with pytest.raises(SystemExit) as info:
        main(["sort", "--path", csv_path, "--order", "maybe"])
    assert info.value.code == 2


def test_main_without_command(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "No subcommand was used\n"


def test_main_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["shape", "--path", str(tmp_path / "absent.csv")])