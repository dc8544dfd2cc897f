"""Five-Point Test (FPT), child (8 a 15 anos) and adult (20 anos em diante) norms.

Percentiles per total of unique designs, from Goebel S, Fischer R, Ferstl R,
Mehdorn HM (2009) and Tucha L et al. Normative Data for Children and Adults.
PLoS ONE 7(9): e46080. Child norms are split by school year rather than age.

Each anchor is a total listed in the manual with its percentile; a total
between two listed values takes the percentile of the one below it, and a
total under the first listed value gets percentile 1. The published
columns are not monotonic in percentile.
"""

from neuro_score.norms.tables import AgeBand, Anchor, PercentileAnchorTable

ANO_ESCOLAR_GROUPS = ("8-9", "10-11", "12-13", "14-15")


def _points(points: dict) -> tuple[Anchor, ...]:
    return tuple(Anchor(percentile, raw) for raw, percentile in sorted(points.items()))


INFANTIL = PercentileAnchorTable(
    name="fpt_infantil.total",
    bands=(AgeBand(8, 15),),
    strata=(
        _points({
            5: 10, 6: 10, 7: 19, 8: 26, 9: 36, 10: 40, 11: 44, 12: 49, 13: 55, 14: 64, 15: 71,
            16: 78, 17: 78, 18: 79, 19: 83, 20: 83, 21: 88, 22: 90, 23: 94, 24: 90, 25: 92,
            26: 98,
        }),
        _points({
            7: 2, 8: 3, 9: 8, 10: 12, 11: 14, 12: 21, 13: 23, 14: 20, 15: 29, 16: 37, 17: 43,
            18: 46, 19: 49, 20: 51, 21: 57, 22: 62, 23: 70, 24: 72, 25: 75, 26: 67, 27: 72,
            28: 79, 29: 85, 30: 91, 31: 88, 32: 92, 33: 95, 35: 97, 36: 99,
        }),
        _points({
            7: 3, 8: 5, 9: 10, 10: 10, 11: 4, 12: 13, 13: 15, 14: 10, 15: 23, 16: 12, 17: 25,
            18: 30, 19: 36, 20: 38, 21: 50, 22: 53, 23: 61, 24: 39, 25: 66, 26: 43, 27: 51,
            28: 77, 29: 85, 30: 63, 31: 69, 32: 90, 33: 80, 34: 86, 35: 88, 36: 93, 37: 94,
            38: 98, 40: 98,
        }),
        _points({
            12: 6, 13: 8, 17: 18, 18: 18, 19: 24, 20: 26, 21: 28, 22: 31, 23: 37, 29: 57,
            32: 73,
        }),
    ),
    groups=ANO_ESCOLAR_GROUPS,
    monotonic=False,
)

ADULTO = PercentileAnchorTable(
    name="fpt_adulto.total",
    bands=(
        AgeBand(20, 29),
        AgeBand(30, 39),
        AgeBand(40, 49),
        AgeBand(50, 59),
        AgeBand(60, 69),
        AgeBand(70, 99),
    ),
    strata=(
        _points({40: 89, 41: 96, 42: 92, 43: 94, 44: 96, 45: 98, 46: 98, 47: 97, 50: 99}),
        _points({
            29: 57, 30: 62, 31: 70, 32: 75, 33: 78, 34: 81, 35: 87, 36: 88, 37: 92, 38: 93,
            39: 98, 40: 95, 42: 98, 43: 99,
        }),
        _points({
            23: 41, 24: 50, 25: 56, 26: 60, 27: 60, 28: 62, 29: 68, 30: 74, 31: 76, 32: 81,
            33: 86, 34: 88, 35: 91, 36: 93, 37: 96, 38: 97, 43: 99, 51: 98, 52: 99,
        }),
        _points({
            20: 27, 21: 31, 22: 33, 23: 50, 24: 56, 25: 60, 26: 60, 27: 62, 28: 68, 29: 74,
            30: 76, 31: 81, 32: 86, 33: 88, 36: 95,
        }),
        _points({
            14: 10, 15: 12, 16: 16, 17: 18, 18: 18, 19: 24, 20: 28, 21: 31, 22: 37, 23: 62,
            24: 68, 25: 72, 26: 82, 27: 85, 28: 87, 29: 90, 30: 90, 32: 95, 36: 98,
        }),
        _points({12: 6, 13: 8, 15: 18, 16: 18, 17: 24, 18: 26, 20: 55, 21: 57, 22: 60, 23: 99, 26: 98}),
    ),
    monotonic=False,
)

INFANTIL_TABLES = {"total": INFANTIL}
ADULTO_TABLES = {"total": ADULTO}
