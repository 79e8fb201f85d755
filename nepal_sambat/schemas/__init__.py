from .nepal_sambat import (
    AstronomicalOut,
    DateResponse,
    FormattedOut,
    GregorianIn,
    LabelledValue,
    MonthOut,
    TithiOut,
    YearResponse,
)
