"""
Shared fixtures for brewcalc tests.
"""

import pytest

from brewcalc.enums import (
    FermentableType,
    HopForm,
    HopType,
    HopUse,
    MiscType,
    MiscUse,
    YeastFlocculation,
    YeastForm,
    YeastType,
)
from brewcalc.models import Fermentable, Hop, Misc, Water, Yeast


@pytest.fixture
def pale_malt() -> Fermentable:
    return Fermentable(
        name="Pale Malt",
        version=1,
        type=FermentableType.GRAIN,
        amount=5.0,
        yield_=78.0,
        color=3.0,
        add_after_boil=False,
        recommend_mash=True,
    )


@pytest.fixture
def cascade() -> Hop:
    return Hop(
        name="Cascade",
        alpha=5.5,
        amount=0.05,
        use=HopUse.BOIL,
        time=60.0,
        type=HopType.AROMA,
        form=HopForm.PELLET,
        origin="US",
    )


@pytest.fixture
def us05() -> Yeast:
    return Yeast(
        name="Safale US-05",
        type=YeastType.ALE,
        form=YeastForm.DRY,
        amount=0.0115,
        amount_is_weight=True,
        laboratory="Fermentis",
        product_id="US-05",
        flocculation=YeastFlocculation.MEDIUM,
        attenuation=81.0,
    )


@pytest.fixture
def irish_moss() -> Misc:
    return Misc(
        name="Irish Moss",
        type=MiscType.FINING,
        use=MiscUse.BOIL,
        time=15.0,
        amount=0.005,
        amount_is_weight=True,
        use_for="Clarity",
    )


@pytest.fixture
def burton() -> Water:
    return Water(
        name="Burton on Trent",
        amount=20.0,
        calcium=295.0,
        bicarbonate=300.0,
        sulfate=725.0,
        chloride=25.0,
        sodium=55.0,
        magnesium=45.0,
        ph=8.0,
    )
