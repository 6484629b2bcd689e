"""Formula templates offered by the advisor.

Arguments are placeholder names for the caller to replace with real
references.
"""

MATH_OPERATIONS = {
    "sum": "=SUM(range)",
    "average": "=AVERAGE(range)",
    "count": "=COUNT(range)",
    "max": "=MAX(range)",
    "min": "=MIN(range)",
    "product": "=PRODUCT(range)",
    "power": "=POWER(number, power)",
    "round": "=ROUND(number, decimals)",
    "roundup": "=ROUNDUP(number, decimals)",
    "rounddown": "=ROUNDDOWN(number, decimals)",
    "sumif": "=SUMIF(range, criteria, [sum_range])",
    "countif": "=COUNTIF(range, criteria)",
}

TEXT_OPERATIONS = {
    "concatenate": "=CONCATENATE(text1, [text2, ...])",
    "left": "=LEFT(text, [num_chars])",
    "right": "=RIGHT(text, [num_chars])",
    "mid": "=MID(text, start_num, num_chars)",
    "len": "=LEN(text)",
    "lower": "=LOWER(text)",
    "upper": "=UPPER(text)",
    "proper": "=PROPER(text)",
    "trim": "=TRIM(text)",
    "substitute": "=SUBSTITUTE(text, old_text, new_text, [instance_num])",
}

DATE_OPERATIONS = {
    "date": "=DATE(year, month, day)",
    "today": "=TODAY()",
    "now": "=NOW()",
    "year": "=YEAR(date)",
    "month": "=MONTH(date)",
    "day": "=DAY(date)",
    "weekday": "=WEEKDAY(date, [type])",
    "networkdays": "=NETWORKDAYS(start_date, end_date, [holidays])",
    "datedif": "=DATEDIF(start_date, end_date, unit)",
}

LOOKUP_OPERATIONS = {
    "vlookup": "=VLOOKUP(lookup_value, table_array, col_index_num, [range_lookup])",
    "hlookup": "=HLOOKUP(lookup_value, table_array, row_index_num, [range_lookup])",
    "index": "=INDEX(array, row_num, [column_num])",
    "match": "=MATCH(lookup_value, lookup_array, [match_type])",
    "indirect": "=INDIRECT(ref_text, [a1])",
    "address": "=ADDRESS(row_num, column_num, [abs_num], [a1], [sheet_text])",
}

CONDITIONAL_OPERATIONS = {
    "if": "=IF(logical_test, value_if_true, value_if_false)",
    "iferror": "=IFERROR(value, value_if_error)",
    "ifna": "=IFNA(value, value_if_na)",
    "and": "=AND(logical1, [logical2, ...])",
    "or": "=OR(logical1, [logical2, ...])",
    "not": "=NOT(logical)",
}

STATISTICAL_OPERATIONS = {
    "stdev": "=STDEV(number1, [number2, ...])",
    "var": "=VAR(number1, [number2, ...])",
    "median": "=MEDIAN(number1, [number2, ...])",
    "mode": "=MODE(number1, [number2, ...])",
    "large": "=LARGE(array, k)",
    "small": "=SMALL(array, k)",
    "percentile": "=PERCENTILE(array, k)",
    "quartile": "=QUARTILE(array, quart)",
}

DEFAULT_FORMULA = MATH_OPERATIONS["sum"]
