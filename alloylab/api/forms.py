"""WTForms for alloy design input."""
from flask_wtf import FlaskForm
from wtforms import FloatField, StringField
from wtforms.validators import Optional, NumberRange, Length

from alloylab.services.elements import ALLOYING_ELEMENTS


class JSONFloatField(FloatField):
    """FloatField fed from a JSON body.

    A JSON null counts as a missing value; arrays and objects are invalid.
    """

    def process_formdata(self, valuelist):
        if valuelist and valuelist[0] is None:
            self.raw_data = []
            return
        try:
            super().process_formdata(valuelist)
        except TypeError:
            self.data = None
            raise ValueError(self.gettext('Not a valid float value.'))


class JSONStringField(StringField):
    """StringField fed from a JSON body; null is missing, scalars become text."""

    def process_formdata(self, valuelist):
        if valuelist and valuelist[0] is None:
            self.raw_data = []
            return
        if valuelist:
            self.data = str(valuelist[0])


class AlloyDesignForm(FlaskForm):
    """Design input: name, process parameters and alloying additions.

    Element weights are not range-checked here; the engine clamps them to
    each element's allowed range. Fe is derived and has no field.
    """
    name = JSONStringField('Alloy Name', validators=[Optional(), Length(max=120)])
    quench_medium = JSONStringField('Quench Medium', validators=[Optional(), Length(max=20)])
    grain_size = JSONFloatField('Grain Size (um)', validators=[
        Optional(), NumberRange(min=0.1, max=1000)
    ])
    target_yield_strength = JSONFloatField('Target Yield Strength (MPa)', validators=[
        Optional(), NumberRange(min=0)
    ])

    Ni = JSONFloatField('Ni (wt%)', validators=[Optional()])
    Cr = JSONFloatField('Cr (wt%)', validators=[Optional()])
    Mo = JSONFloatField('Mo (wt%)', validators=[Optional()])
    C = JSONFloatField('C (wt%)', validators=[Optional()])
    Mn = JSONFloatField('Mn (wt%)', validators=[Optional()])
    Si = JSONFloatField('Si (wt%)', validators=[Optional()])
    Ti = JSONFloatField('Ti (wt%)', validators=[Optional()])
    V = JSONFloatField('V (wt%)', validators=[Optional()])

    def element_weights(self) -> dict:
        """Weights of the element fields that were supplied."""
        weights = {}
        for el in ALLOYING_ELEMENTS:
            value = getattr(self, el).data
            if value is not None:
                weights[el] = value
        return weights
