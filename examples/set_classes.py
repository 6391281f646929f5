import collections
import logging

import chromaset
import chromaset.scale_modes

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)

# Group the 2048 sets that contain C by their normalized chroma. Each group is
# one transposition class; its size is the number of distinct transpositions
# that still contain C.
classes = collections.defaultdict(list)

for c in chromaset.chromas():
	classes[chromaset.normalize(c)].append(c)

logger.info(f"{len(classes)} transposition classes among {len(chromaset.chromas())} sets")

# Sets that map onto themselves under some transposition.
symmetric = sorted(n for n, members in classes.items() if len(set(chromaset.modes(members[0], normalize=False))) < 12)

for normalized in symmetric:
	s = chromaset.pcset(normalized)
	logger.info(f"symmetric: {normalized}  {' '.join(s.intervals)}")

# Which diatonic modes contain a D minor triad?
has_d_minor = chromaset.is_superset_of(["d", "f", "a"])

for mode in chromaset.scale_modes.all_modes():
	for tonic in ("C", "D", "E", "F", "G", "A", "B"):
		notes = chromaset.scale_modes.mode_notes(mode, tonic)
		if has_d_minor(notes):
			logger.info(f"{tonic} {mode.name}: {' '.join(notes)}")
