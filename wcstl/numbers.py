"""Mathematical constants."""

E = 2.718281828459045235
LOG2E = 1.442695040888963407
LOG10E = 0.434294481903251827
PI = 3.141592653589793238
INV_PI = 0.318309886183790671
INV_SQRTPI = 0.564189583547756286
LN2 = 0.693147180559945309
LN10 = 2.302585092994045684
SQRT2 = 1.414213562373095048
SQRT3 = 1.732050807568877293
INV_SQRT3 = 0.577350269189625764
EGAMMA = 0.577215664901532860
PHI = 1.618033988749894848