from logging import getLogger

from django.conf import settings
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_POST, require_safe
from django.views.decorators.csrf import csrf_exempt
import json

from .fsa_properties import is_complete, validate_nfa_description
from .fsa_serialisation import (
    dfa_to_description,
    nfa_from_description,
    nfa_to_description,
    subsets_to_description
)
from .fsa_transformations import minimise_dfa, subset_construction

logger = getLogger(__name__)


class InvalidNFA(ValueError):
    """Raised when a request body does not describe a well-formed NFA."""


def _parse_nfa(request):
    """
    Decodes the request body and builds the NFA it describes.

    Raises:
        ValueError: If the body is not JSON
        InvalidNFA: If the description fails validation
    """
    description = json.loads(request.body)

    validation = validate_nfa_description(description, max_states=settings.FSA_MAX_NFA_STATES)
    if not validation['valid']:
        raise InvalidNFA(validation['error'])

    return nfa_from_description(description)


def _automaton_stats(automaton):
    return {
        'states_count': len(automaton.states),
        'alphabet_size': len(automaton.alphabet),
        'transitions_count': automaton.transition_count,
        'accepting_states_count': len(automaton.accepting)
    }


@require_safe
def health(request):
    return HttpResponse('Server is running', content_type='text/plain')


@csrf_exempt
@require_POST
def convert_nfa_to_dfa(request):
    """
    Django view to handle NFA to DFA conversion requests.

    Expects a POST request whose JSON body is an NFA description
    (states, alphabet, transitions, start, accept).

    Returns a JSON response with the normalised NFA, the converted DFA, the
    NFA subset behind each DFA state and conversion statistics.
    """
    try:
        nfa = _parse_nfa(request)

        dfa, subsets = subset_construction(nfa)

        original_stats = _automaton_stats(nfa)
        original_stats['has_epsilon_transitions'] = nfa.has_epsilon_transitions

        converted_stats = _automaton_stats(dfa)
        converted_stats['is_complete'] = is_complete(dfa)

        logger.info(
            'Converted NFA with %d states to DFA with %d states',
            original_stats['states_count'], converted_stats['states_count']
        )

        return JsonResponse({
            'nfa': nfa_to_description(nfa),
            'dfa': dfa_to_description(dfa),
            'subsets': subsets_to_description(subsets),
            'statistics': {
                'original': original_stats,
                'converted': converted_stats,
                'states_added': converted_stats['states_count'] - original_stats['states_count']
            }
        })

    except InvalidNFA as e:
        logger.warning('Rejected NFA: %s', e)
        return JsonResponse({'error': str(e)}, status=400)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        logger.exception('NFA to DFA conversion failed')
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)


@csrf_exempt
@require_POST
def convert_nfa_to_minimal_dfa(request):
    """
    Django view to convert an NFA to a minimised DFA.

    Runs subset construction followed by minimisation. Expects the same body as
    the conversion endpoint and returns the normalised NFA, the minimised DFA and
    reduction statistics.
    """
    try:
        nfa = _parse_nfa(request)

        dfa, _ = subset_construction(nfa)
        minimised_dfa = minimise_dfa(dfa)

        converted_stats = _automaton_stats(dfa)
        minimised_stats = _automaton_stats(minimised_dfa)
        minimised_stats['is_complete'] = is_complete(minimised_dfa)

        # Reduction relative to the unminimised DFA
        reduction_stats = {
            'states_reduced': converted_stats['states_count'] - minimised_stats['states_count'],
            'states_reduction_percentage': round(
                ((converted_stats['states_count'] - minimised_stats['states_count']) /
                 converted_stats['states_count']) * 100, 2
            ),
            'is_already_minimal': converted_stats['states_count'] == minimised_stats['states_count']
        }

        logger.info(
            'Minimised DFA from %d to %d states',
            converted_stats['states_count'], minimised_stats['states_count']
        )

        return JsonResponse({
            'nfa': nfa_to_description(nfa),
            'dfa': dfa_to_description(minimised_dfa),
            'statistics': {
                'original': _automaton_stats(nfa),
                'converted': converted_stats,
                'minimised': minimised_stats,
                'reduction': reduction_stats
            }
        })

    except InvalidNFA as e:
        logger.warning('Rejected NFA: %s', e)
        return JsonResponse({'error': str(e)}, status=400)
    except ValueError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        logger.exception('NFA to minimal DFA conversion failed')
        return JsonResponse({'error': f'Server error: {str(e)}'}, status=500)
