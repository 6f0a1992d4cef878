"""Built-in neurology word bank."""

from __future__ import annotations

from typing import List, Tuple

from ..core.models import WordEntry
from .normalization import clean_answer


_RAW_BANK: Tuple[Tuple[str, str], ...] = (
    ("APHASIA", "Language impairment from dominant hemisphere lesion"),
    ("BROCA", "Inferior frontal language area for speech production"),
    ("WERNICKE", "Posterior temporal language area for comprehension"),
    ("BABINSKI", "Upgoing plantar response"),
    ("ATAXIA", "Incoordination typically from cerebellar dysfunction"),
    ("CEREBELLUM", "Coordination and balance center"),
    ("THALAMUS", "Major relay for sensory pathways to cortex"),
    ("PARKINSON", "Bradykinesia, rigidity, rest tremor"),
    ("ALZHEIMER", "Most common cause of dementia"),
    ("MIGRAINE", "Headache with aura in some patients"),
    ("SEIZURE", "Paroxysmal abnormal synchronized neuronal activity"),
    ("EPILEPSY", "Tendency to have unprovoked seizures"),
    ("STATUS", "Seizure lasting >5 minutes or repeated without recovery"),
    ("STROKE", "Acute neurologic deficit from vascular cause"),
    ("ISCHEMIA", "Inadequate blood supply to tissue"),
    ("INFARCT", "Tissue death from ischemia"),
    ("BASILAR", "Trunk artery supplying brainstem and cerebellum"),
    ("PONS", "Brainstem segment between midbrain and medulla"),
    ("MEDULLA", "Houses nuclei for autonomic functions and cranial nerves"),
    ("OPTIC", "Nerve conveying visual information"),
    ("TRIGEMINAL", "Cranial nerve for facial sensation"),
    ("VAGUS", "Cranial nerve X with parasympathetic output"),
    ("MIDBRAIN", "Contains superior and inferior colliculi"),
    ("CAROTID", "Artery commonly involved in anterior circulation stroke"),
    ("VENTRICLE", "CSF-filled brain cavity"),
    ("MENINGES", "Dura, arachnoid, and pia"),
    ("MYELIN", "Insulating sheath around axons"),
    ("AXON", "Neuronal process conducting action potentials"),
    ("DENDRITE", "Branching neuronal input structure"),
    ("SYNAPSE", "Junction between neurons"),
)

# Daily puzzles draw from at most this many bank entries.
DEFAULT_BANK_LIMIT = 30

NEUROLOGY_BANK: Tuple[WordEntry, ...] = tuple(
    WordEntry(answer=clean_answer(answer), clue=clue) for answer, clue in _RAW_BANK
)


def default_bank() -> List[WordEntry]:
    return list(NEUROLOGY_BANK[:DEFAULT_BANK_LIMIT])
