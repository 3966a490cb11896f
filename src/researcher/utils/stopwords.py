# src/researcher/utils/stopwords.py
"""Function word lists per language, used to judge keyphrases and keyword matches."""
from typing import FrozenSet

STOPWORDS_EN = frozenset("""
    a about above after again against all am an and any are as at be because been before being below between
    both but by can could did do does doing down during each few for from further had has have having he her
    here hers him his how i if in into is it its itself just me more most my myself no nor not of off on once
    only or other our ours ourselves out over own same say she should so some such than that the their theirs
    them themselves then there these they this those through to too under until up very was we were what when
    where which while who whom why with you your yours yourself yourselves
""".split())

STOPWORDS_NL = frozenset("""
    aan aangaande aldus alhier alle allebei alleen alles als alsnog altijd althans anders ook behalve beiden
    ben bent bij bijna binnen boven buiten daarentegen daarheen daarom daarop daarvan dat de der deze die dit
    doch doen door dus echter een eens en enz er erg erdoor even eveneens evenwel gauw ge geen geleden gelijk
    gemogen geweest haar had hadden heb hebben heeft hem hen het hierbeneden hierboven hij hoe hoewel hun ik
    ieder iedere indien in inmiddels is je jij jou jouw jullie kan kon konden kunnen laat later liever maar
    mag men met mij mijn moet moeten na naar nadat naast net niet noch nog nu of omdat om omtrent onder
    ondertussen ons onze op over reeds slechts sinds sommige spoedig steeds te tegen toch toen tot tussen uit
    uiteindelijk van vanaf vanwege veel verder vervolgens via voor vooral voordat vroeg waarom wanneer want
    waren was wat weer weg wel welke wellicht wie wiens wier wij wil willen wordt worden zou zouden zullen
    zulk zulke zijn zo zodra zodat zonder
""".split())

FUNCTION_WORDS = {
    "en": STOPWORDS_EN,
    "nl": STOPWORDS_NL,
}


def get_function_words(language: str) -> FrozenSet[str]:
    """Returns the function words for a language code ('en', 'nl'); empty when unknown."""
    return FUNCTION_WORDS.get((language or "").lower(), frozenset())
