"""Closed enumeration of the organisms found in IMGT/LIGM-DB.

Each member carries its display (common) name and the exact organism
string used on ``OS`` lines of LIGM-DB records.
"""

from enum import Enum


class UnknownSpeciesError(ValueError):
    """Raised for organism strings that are neither a species nor a known non-species source."""


# OS values that are legitimately not an organism (vectors, constructs)
NON_SPECIES = frozenset({
    "synthetic construct (synthetic construct)",
    "unidentified",
    "unclassified sequences",
    "unidentified cloning vector",
    "Cloning vector AbVec-hIgG1",
    "Cloning vector AbVec-hIgKappa",
    "Cloning vector pASK88-huHRS3-VH-EP3/1",
    "Cloning vector pchiIGHG1",
    "Cloning vector pchiIGKC",
    "Cloning vector pCL",
    "Cloning vector pCLZip",
    "Cloning vector pMAB136",
    "Cloning vector pUR4546",
    "Cloning vector pUR4585",
    "Expression vector p28BIOH-LIC4",
    "Expression vector pFUSE-HEAVY",
    "Expression vector pFUSE-hFc2-adapt-scFv",
    "Expression vector pFUSE-LIGHT",
    "Expression vector pFUSE-mFc2-adapt-scFv",
    "Expression vector pFUSE-rFc2-adapt-scFv",
    "Expression vector pHIN-PEP",
    "Expression vector pHIN-TRI",
    "Expression vector pSFV4",
    "Expression vector pTH-HIN",
    "Phagemid vector pGALD7",
    "Phagemid vector pGALD7DL",
    "Phagemid vector pGALD7DLFN",
    "Phagemid vector pGALD9",
    "Phagemid vector pGALD9DL",
    "Phagemid vector pGALD9DLFN",
    "Phagemid vector pMID21",
    "Enterobacteria phage M13 vector DY3F63",
})


class Species(Enum):
    """An organism, valued as (common name, IMGT organism string)."""

    ACANTHOPAGRUS_SCHLEGELII = ("Black porgy", "Acanthopagrus schlegelii (black porgy)")
    ACIPENSER_BAERII = ("Siberian sturgeon", "Acipenser baerii (Siberian sturgeon)")
    ACIPENSER_GUELDENSTAEDTII = ("Russian sturgeon", "Acipenser gueldenstaedtii (Russian sturgeon)")
    ACIPENSER_RUTHENUS = ("Sterlet", "Acipenser ruthenus (sterlet)")
    ACIPENSER_SCHRENCKII = ("Amur sturgeon", "Acipenser schrenckii (Amur sturgeon)")
    ACIPENSER_SINENSIS = ("Chinese sturgeon", "Acipenser sinensis (Chinese sturgeon)")
    AILUROPODA_MELANOLEUCA = ("Giant panda", "Ailuropoda melanoleuca (giant panda)")
    ALLIGATOR_SINENSIS = ("Chinese alligator", "Alligator sinensis (Chinese alligator)")
    AMBLYRAJA_GEORGIANA = ("Antarctic starry skate", "Amblyraja georgiana (Antarctic starry skate)")
    AMBLYRAJA_HYPERBOREA = ("Arctic skate", "Amblyraja hyperborea (Arctic skate)")
    AMBYSTOMA_MEXICANUM = ("Axolotl", "Ambystoma mexicanum (axolotl)")
    AMEIVA_AMEIVA = ("Jungle runners", "Ameiva ameiva")
    AMIA_CALVA = ("Bowfin", "Amia calva (bowfin)")
    AMPHIPRION_CLARKII = ("Yellowtail clownfish", "Amphiprion clarkii (yellowtail clownfish)")
    ANARHICHAS_MINOR = ("Spotted wolffish", "Anarhichas minor (spotted wolffish)")
    ANAS_PLATYRHYNCHOS = ("Mallard", "Anas platyrhynchos (mallard)")
    ANGUILLA_ANGUILLA = ("European eel", "Anguilla anguilla (European eel)")
    ANGUILLA_JAPONICA = ("Japanese eel", "Anguilla japonica (Japanese eel)")
    ANOLIS_CAROLINENSIS = ("Green anole", "Anolis carolinensis (green anole)")
    ANOPLOPOMA_FIMBRIA = ("Sablefish", "Anoplopoma fimbria (sablefish)")
    ANSER_ANSER = ("Domestic goose", "Anser anser (Domestic goose)")
    ANSER_ANSER_DOMESTICUS = ("Domestic goose", "Anser anser domesticus")
    ANSER_CAERULESCENS = ("Snow goose", "Anser caerulescens (Snow goose)")
    ANSER_SP_GIGHV2011 = ("Geese GIGHV2011", "Anser sp. GIGHV2011")
    ANSER_SP_GIGLV2009 = ("Geese GIGLV2009", "Anser sp. GIGLV2009")
    AOTUS_AZARAI = ("Azara's night monkey", "Aotus azarai (Azara's night monkey)")
    AOTUS_NANCYMAAE = ("Ma's night monkey", "Aotus nancymaae (Ma's night monkey)")
    AOTUS_TRIVIRGATUS = ("Douroucouli", "Aotus trivirgatus (douroucouli)")
    ARGYROPELECUS_HEMIGYMNUS = ("Half-naked hatchetfish", "Argyropelecus hemigymnus (half-naked hatchetfish)")
    ATELES_BELZEBUTH = ("White-bellied spider monkey", "Ateles belzebuth (white-bellied spider monkey)")
    ATELES_GEOFFROYI = ("Black-handed spider monkey", "Ateles geoffroyi (black-handed spider monkey)")
    ATHERINA_BOYERI = ("Big-scale sand smelt", "Atherina boyeri (big-scale sand smelt)")
    BALAENOPTERA_ACUTOROSTRATA = ("Minke whale", "Balaenoptera acutorostrata (minke whale)")
    BALAENOPTERA_OMURAI = ("Omura's baleen whale", "Balaenoptera omurai (Omura's baleen whale)")
    BATHYRAJA_ALBOMACULATA = ("White-dotted skate", "Bathyraja albomaculata (white-dotted skate)")
    BATHYRAJA_BRACHYUROPS = ("Broadnose skate", "Bathyraja brachyurops (broadnose skate)")
    BATHYRAJA_EATONII = ("Eaton's skate", "Bathyraja eatonii (Eaton's skate)")
    BOS_GAURUS = ("Gaur", "Bos gaurus (gaur)")
    BOS_INDICUS = ("Domestic zebu", "Bos indicus (zebu cattle)")
    BOS_JAVANICUS = ("Banteng", "Bos javanicus (banteng)")
    BOS_TAURUS = ("Domestic bovine", "Bos taurus (bovine)")
    BOS_TAURUS_X_BOS_INDICUS = ("Bos Tauris and Bos indicus cross", "Bos taurus x Bos indicus")
    BOVICHTUS_DIACANTHUS = ("Tristan clipfish", "Bovichtus diacanthus")
    BUBALUS_BUBALIS = ("Water buffalo", "Bubalus bubalis (water buffalo)")
    BUERGERIA_BUERGERI = ("Buerger's frog", "Buergeria buergeri (Buerger's frog)")
    CAIMAN_CROCODILUS = ("Spectacled caiman", "Caiman crocodilus (spectacled caiman)")
    CAIRINA_MOSCHATA = ("Muscovy duck", "Cairina moschata (Muscovy duck)")
    CALLITHRIX_JACCHUS = ("white-tufted-ear marmoset", "Callithrix jacchus (white-tufted-ear marmoset)")
    CALLORHINCHUS_MILII = ("Elephant shark", "Callorhinchus milii (elephant shark)")
    CAMELIDAE = ("Camels", "Camelidae")
    CAMELUS_BACTRIANUS = ("Bactrian camel", "Camelus bactrianus (Bactrian camel)")
    CAMELUS_DROMEDARIUS = ("Arabian camel", "Camelus dromedarius (Arabian camel)")
    CANIS_LUPUS = ("Gray wolf", "Canis lupus (gray wolf)")
    CANIS_LUPUS_FAMILIARIS = ("Domestic dog", "Canis lupus familiaris (dog)")
    CANIS_SP = ("Dogs", "Canis sp.")
    CAPRA_HIRCUS = ("Domestic goat", "Capra hircus (goat)")
    CARASSIUS_AURATUS = ("Goldfish", "Carassius auratus (goldfish)")
    CARASSIUS_LANGSDORFII = ("Japanese silver crucian carp", "Carassius langsdorfii (Japanese silver crucian carp)")
    CARCHARHINUS_LEUCAS = ("Bull shark", "Carcharhinus leucas (bull shark)")
    CARCHARHINUS_PLUMBEUS = ("Sandbar shark", "Carcharhinus plumbeus (sandbar shark)")
    CAROLLIA_PERSPICILLATA = ("Seba's short-tailed bat", "Carollia perspicillata (Seba's short-tailed bat)")
    CAVIA_PORCELLUS = ("Domestic guinea pig", "Cavia porcellus (domestic guinea pig)")
    CEPHALOPACHUS_BANCANUS = ("Horsfield's tarsier", "Cephalopachus bancanus (Horsfield's tarsier)")
    CERATOTHERIUM_SIMUM = ("White rhinoceros", "Ceratotherium simum (white rhinoceros)")
    CERCOCEBUS_ATYS = ("Sooty mangabey", "Cercocebus atys (sooty mangabey)")
    CERCOCEBUS_TORQUATUS = ("Collared mangabey", "Cercocebus torquatus (collared mangabey)")
    CERVUS_ELAPHUS_HISPANICUS = ("Spanish red deer", "Cervus elaphus hispanicus")
    CHAENOCEPHALUS_ACERATUS = ("Blackfin icefish", "Chaenocephalus aceratus (blackfin icefish)")
    CHAMPSOCEPHALUS_ESOX = ("Pike icefish", "Champsocephalus esox (pike icefish)")
    CHANNA_ARGUS = ("Northern snakehead", "Channa argus (northern snakehead)")
    CHANNA_STRIATA = ("Snakehead murrel", "Channa striata (snakehead murrel)")
    CHAUNA_TORQUATA = ("Southern screamer", "Chauna torquata (southern screamer)")
    CHELON_AURATUS = ("Golden grey mullet", "Chelon auratus (golden grey mullet)")
    CHIONODRACO_HAMATUS = ("Antarctic icefish", "Chionodraco hamatus (Antarctic icefish)")
    CHIONODRACO_RASTROSPINOSUS = ("Ocellated icefish", "Chionodraco rastrospinosus (ocellated icefish)")
    CHLOROCEBUS_AETHIOPS = ("Grivet", "Chlorocebus aethiops (grivet)")
    CLUPEA_PALLASII = ("Pacific herring", "Clupea pallasii (Pacific herring)")
    COLOBUS_GUEREZA = ("Mantled guereza", "Colobus guereza (mantled guereza)")
    COLOBUS_POLYKOMOS = ("King colobus", "Colobus polykomos (king colobus)")
    CRICETINAE_SP = ("Hamster", "Cricetinae gen. sp. (Hamster)")
    CRICETULUS_MIGRATORIUS = ("Armenian hamster", "Cricetulus migratorius (Armenian hamster)")
    CROCODYLUS_SIAMENSIS = ("Siamese crocodile", "Crocodylus siamensis (Siamese crocodile)")
    CTENOPHARYNGODON_IDELLA = ("Grass carp", "Ctenopharyngodon idella (grass carp)")
    CYGNODRACO_MAWSONI = ("Mawson's dragonfish", "Cygnodraco mawsoni (Mawson's dragonfish)")
    CYNOGLOSSUS_SEMILAEVIS = ("Tongue sole", "Cynoglossus semilaevis (tongue sole)")
    CYNOPTERUS_SPHINX = ("Indian short-nosed fruit bat", "Cynopterus sphinx (Indian short-nosed fruit bat)")
    CYPRINUS_CARPIO = ("Common carp", "Cyprinus carpio (common carp)")
    DANIO_RERIO = ("Zebrafish", "Danio rerio (zebrafish)")
    DAUBENTONIA_MADAGASCARIENSIS = ("Aye-aye", "Daubentonia madagascariensis (aye-aye)")
    DELPHINAPTERUS_LEUCAS = ("Beluga whale", "Delphinapterus leucas (beluga whale)")
    DELPHINUS_CAPENSIS = ("Long-beaked common dolphin", "Delphinus capensis (long-beaked common dolphin)")
    DICENTRARCHUS_LABRAX = ("European seabass", "Dicentrarchus labrax (European seabass)")
    DISSOSTICHUS_MAWSONI = ("Antarctic toothfish", "Dissostichus mawsoni (Antarctic toothfish)")
    DROSOPHILA_MELANOGASTER = ("Fruit fly", "Drosophila melanogaster (fruit fly)")
    ELAPHE_TAENIURA = ("Beauty snake", "Elaphe taeniura (beauty snake)")
    ELEGINOPS_MACLOVINUS = ("Patagonian blennie", "Eleginops maclovinus (Patagonian blennie)")
    ELOPS_AAURUS = ("Ladyfish", "Elops saurus (ladyfish)")
    EPINEPHELUS_AKAARA = ("Hong Kong grouper", "Epinephelus akaara (Hong Kong grouper)")
    EPINEPHELUS_COIOIDES = ("Orange-spotted grouper", "Epinephelus coioides (orange-spotted grouper)")
    EPTATRETUS_BURGERI = ("Inshore hagfish", "Eptatretus burgeri (inshore hagfish)")
    EPTESICUS_FUSCUS = ("Big brown bat", "Eptesicus fuscus (big brown bat)")
    EQUUS_ASINUS = ("Ass", "Equus asinus (ass)")
    EQUUS_BURCHELLII_ANTIQUORUM = ("Burchell's zebra", "Equus burchellii antiquorum")
    EQUUS_CABALLUS = ("Domestic horse", "Equus caballus (horse)")
    ERYTHROCEBUS_PATAS = ("Red guenon", "Erythrocebus patas (red guenon)")
    ESCHERICHIA_COLI = ("E. coli", "Escherichia coli (E. coli)")
    ESOX_LUCIUS = ("Northern pike", "Esox lucius (northern pike)")
    EUBLEPHARIS_MACULARIUS = ("Leopard gecko", "Eublepharis macularius (Leopard gecko)")
    EULEMUR_FULVUS = ("Brown lemur", "Eulemur fulvus (brown lemur)")
    FELINE_LEUKEMIA_VIRUS = ("Feline leukemia virus", "Feline leukemia virus")
    FELIS_CATUS = ("Domestic cat", "Felis catus (domestic cat)")
    FELIS_SP = ("Cats", "Felis sp.")
    GADUS_MORHUA = ("Atlantic cod", "Gadus morhua (Atlantic cod)")
    GALAGO_SENEGALENSIS = ("Senegal galago", "Galago senegalensis (Senegal galago)")
    GALLUS_GALLUS = ("Domestic chicken", "Gallus gallus (chicken)")
    GASTEROSTEUS_ACULEATUS = ("Three-spined stickleback", "Gasterosteus aculeatus (three-spined stickleback)")
    GINGLYMOSTOMA_CIRRATUM = ("Nurse shark", "Ginglymostoma cirratum (nurse shark)")
    GOBIONOTOTHEN_GIBBERIFRONS = ("Humped rockcod", "Gobionotothen gibberifrons (humped rockcod)")
    GORILLA_GORILLA = ("Western gorilla", "Gorilla gorilla (western gorilla)")
    GORILLA_GORILLA_GORILLA = ("Western lowland gorilla", "Gorilla gorilla gorilla (western lowland gorilla)")
    GRAMPUS_GRISEUS = ("Risso's dolphin", "Grampus griseus (Risso's dolphin)")
    GYMNODRACO_ACUTICEPS = ("Ploughfish", "Gymnodraco acuticeps")
    GYMNOGYPS_CALIFORNIANUS = ("California condor", "Gymnogyps californianus (California condor)")
    HAEMORHOUS_MEXICANUS = ("House finch", "Haemorhous mexicanus (house finch)")
    HEMIBAGRUS_MACROPTERUS = ("Largefin longbarbel catfish", "Hemibagrus macropterus")
    HEPACIVIRUS_C = ("Hepacivirus C", "Hepacivirus C")
    HETEROCEPHALUS_GLABER = ("Naked mole-rat", "Heterocephalus glaber (naked mole-rat)")
    HETERODONTUS_FRANCISCI = ("Horn shark", "Heterodontus francisci (horn shark)")
    HIPPOGLOSSUS_HIPPOGLOSSUS = ("Atlantic halibut", "Hippoglossus hippoglossus (Atlantic halibut)")
    HISTIODRACO_VELIFER = ("Histiodraco velifer", "Histiodraco velifer")
    HOMO_SAPIENS = ("Human", "Homo sapiens (human)")
    HOOLOCK_HOOLOCK = ("Hoolock gibbon", "Hoolock hoolock (hoolock gibbon)")
    HUSO_HUSO = ("Beluga", "Huso huso (beluga)")
    HYDROLAGUS_COLLIEI = ("Spotted ratfish", "Hydrolagus colliei (spotted ratfish)")
    HYLOBATES_LAR = ("Common gibbon", "Hylobates lar (common gibbon)")
    ICTALURUS_PUNCTATUS = ("Channel catfish", "Ictalurus punctatus (channel catfish)")
    ISOODON_MACROURUS = ("Northern brown bandicoot", "Isoodon macrourus (northern brown bandicoot)")
    KOGIA_SIMA = ("Dwarf sperm whale", "Kogia sima (dwarf sperm whale)")
    LABEOBARBUS_INTERMEDIUS = ("Labeobarbus intermedius", "Labeobarbus intermedius")
    LABEO_ROHITA = ("Rohu", "Labeo rohita (rohu)")
    LAMA_GLAMA = ("Llama", "Lama glama (llama)")
    LARIMICHTHYS_CROCEA = ("Large yellow croaker", "Larimichthys crocea (large yellow croaker)")
    LATIMERIA_CHALUMNAE = ("Coelacanth", "Latimeria chalumnae (coelacanth)")
    LATIMERIA_MENADOENSIS = ("Menado coelacanth", "Latimeria menadoensis (Menado coelacanth)")
    LATRIS_LINEATA = ("Striped trumpeter", "Latris lineata (striped trumpeter)")
    LEMUR_CATTA = ("Ring-tailed lemur", "Lemur catta (Ring-tailed lemur)")
    LEONTOPITHECUS_ROSALIA = ("Golden lion tamarin", "Leontopithecus rosalia (golden lion tamarin)")
    LEPILEMUR_RUFICAUDATUS = ("Red-tailed sportive lemur", "Lepilemur ruficaudatus (red-tailed sportive lemur)")
    LEPISOSTEUS_OSSEUS = ("Longnose gar", "Lepisosteus osseus (longnose gar)")
    LEPUS_AMERICANUS = ("Snowshoe hare", "Lepus americanus (snowshoe hare)")
    LEPUS_CALIFORNICUS = ("Black-tailed jackrabbit", "Lepus californicus (black-tailed jackrabbit)")
    LEPUS_CALLOTIS = ("White-sided jackrabbit", "Lepus callotis (white-sided jackrabbit)")
    LEPUS_CAPENSIS = ("Brown hare", "Lepus capensis (brown hare)")
    LEPUS_CASTROVIEJOI = ("Broom Hare", "Lepus castroviejoi (Broom Hare)")
    LEPUS_EUROPAEUS = ("European hare", "Lepus europaeus (European hare)")
    LEPUS_GRANATENSIS = ("Granada hare", "Lepus granatensis (Granada hare)")
    LEPUS_SAXATILIS = ("Scrub hare", "Lepus saxatilis (scrub hare)")
    LEPUS_TIMIDUS = ("Mountain hare", "Lepus timidus (Mountain hare)")
    LEUCORAJA_ERINACEA = ("Little skate", "Leucoraja erinacea (little skate)")
    LIPOTES_VEXILLIFER = ("Yangtze River dolphin", "Lipotes vexillifer (Yangtze River dolphin)")
    LUTJANUS_SANGUINEUS = ("Humphead snapper", "Lutjanus sanguineus (humphead snapper)")
    MACACA_ARCTOIDES = ("Stump-tailed macaque", "Macaca arctoides (stump-tailed macaque)")
    MACACA_ASSAMENSIS = ("Assam macaque", "Macaca assamensis (Assam macaque)")
    MACACA_CYCLOPIS = ("Taiwan macaque", "Macaca cyclopis (Taiwan macaque)")
    MACACA_FASCICULARIS = ("Crab-eating macaque", "Macaca fascicularis (crab-eating macaque)")
    MACACA_MULATTA = ("Rhesus monkey", "Macaca mulatta (Rhesus monkey)")
    MACACA_NEMESTRINA = ("Pig-tailed macaque", "Macaca nemestrina (pig-tailed macaque)")
    MACACA_SILENUS = ("Liontail macaque", "Macaca silenus (liontail macaque)")
    MACACA_THIBETANA = ("Pere David's macaque", "Macaca thibetana (Pere David's macaque)")
    MARECA_STREPERA = ("Gadwall", "Mareca strepera (gadwall)")
    MARMOTA_HIMALAYANA = ("Himalayan marmot", "Marmota himalayana (Himalayan marmot)")
    MARMOTA_MONAX = ("Woodchuck", "Marmota monax (woodchuck)")
    MAUREMYS_MUTICA = ("Yellowpond turtle", "Mauremys mutica (yellowpond turtle)")
    MELANOGRAMMUS_AEGLEFINUS = ("Haddock", "Melanogrammus aeglefinus (haddock)")
    MELEAGRIS_GALLOPAVO = ("Turkey", "Meleagris gallopavo (turkey)")
    MERIONES_UNGUICULATUS = ("Mongolian gerbil", "Meriones unguiculatus (Mongolian gerbil)")
    MESOCRICETUS_AURATUS = ("Golden hamster", "Mesocricetus auratus (golden hamster)")
    MICROCEBUS_MURINUS = ("Gray mouse lemur", "Microcebus murinus (gray mouse lemur)")
    MONODELPHIS_DOMESTICA = ("Gray short-tailed opossum", "Monodelphis domestica (gray short-tailed opossum)")
    MURINAE_SP = ("Old world rats and mice", "Murinae gen. sp.")
    MUS = ("mouse", "Mus (mouse)")
    MUS_COOKII = ("Cook's mouse", "Mus cookii (Cook's mouse)")
    MUS_MINUTOIDES = ("Southern African pygmy mouse", "Mus minutoides (Southern African pygmy mouse)")
    MUS_MUSCULUS = ("House mouse", "Mus musculus (house mouse)")
    MUS_MUSCULUS_CASTANEUS = ("Southeastern Asian house mouse", "Mus musculus castaneus (southeastern Asian house mouse)")
    MUS_MUSCULUS_DOMESTICUS = ("Western European house mouse", "Mus musculus domesticus (western European house mouse)")
    MUS_MUSCULUS_MOLOSSINUS = ("Japanese wild mouse", "Mus musculus molossinus (Japanese wild mouse)")
    MUS_MUSCULUS_MUSCULUS = ("Eastern European house mouse", "Mus musculus musculus (eastern European house mouse)")
    MUS_PAHARI = ("Shrew mouse", "Mus pahari (shrew mouse)")
    MUS_SAXICOLA = ("Spiny mouse", "Mus saxicola (spiny mouse)")
    MUS_SP = ("Mice", "Mus sp. (mice)")
    MUS_SPRETUS = ("Western wild mouse", "Mus spretus (western wild mouse)")
    MUSTELA_PUTORIUS_FURO = ("Domestic ferret", "Mustela putorius furo (domestic ferret)")
    MUSTELA_SP = ("Ferret", "Mustela sp.")
    MYOTIS_LUCIFUGUS = ("Little brown bat", "Myotis lucifugus (little brown bat)")
    NEOPHOCAENA_PHOCAENOIDES = ("Indo-Pacific finless porpoise", "Neophocaena phocaenoides (Indo-Pacific finless porpoise)")
    NEOVISON_VISON = ("American mink", "Neovison vison (American mink)")
    NOMASCUS_CONCOLOR = ("Black crested gibbon", "Nomascus concolor (Black crested gibbon)")
    NOTAMACROPUS_EUGENII = ("Tammar wallaby", "Notamacropus eugenii (tammar wallaby)")
    NOTOTHENIA_CORIICEPS = ("Black rockcod", "Notothenia coriiceps (black rockcod)")
    NYCTICEBUS_COUCANG = ("Slow loris", "Nycticebus coucang (slow loris)")
    ONCORHYNCHUS_GORBUSCHA = ("Pink salmon", "Oncorhynchus gorbuscha (pink salmon)")
    ONCORHYNCHUS_MYKISS = ("Rainbow trout", "Oncorhynchus mykiss (rainbow trout)")
    ONCORHYNCHUS_TSHAWYTSCHA = ("Chinook salmon", "Oncorhynchus tshawytscha (Chinook salmon)")
    ORECTOLOBUS_MACULATUS = ("Spotted wobbegong", "Orectolobus maculatus (spotted wobbegong)")
    OREOCHROMIS_NILOTICUS = ("Nile tilapia", "Oreochromis niloticus (Nile tilapia)")
    ORNITHORHYNCHUS_ANATINUS = ("Platypus", "Ornithorhynchus anatinus (platypus)")
    ORYCTOLAGUS_CUNICULUS = ("Rabbit", "Oryctolagus cuniculus (rabbit)")
    ORYCTOLAGUS_CUNICULUS_ALGIRUS = ("European rabbit", "Oryctolagus cuniculus algirus")
    ORYCTOLAGUS_CUNICULUS_CUNICULUS = ("Rabbit", "Oryctolagus cuniculus cuniculus")
    ORYZIAS_LATIPES = ("Japanese medaka", "Oryzias latipes (Japanese medaka)")
    ORYZIAS_MELASTIGMA = ("Indian medaka", "Oryzias melastigma (Indian medaka)")
    OTOLEMUR_CRASSICAUDATUS = ("Thick-tailed bush baby", "Otolemur crassicaudatus (thick-tailed bush baby)")
    OVIS_ARIES = ("Domestic sheep", "Ovis aries (sheep)")
    OVIS_SP = ("Sheep", "Ovis sp.")
    PACIFASTACUS_LENIUSCULUS = ("Signal crayfish", "Pacifastacus leniusculus (signal crayfish)")
    PAGETOPSIS_MACROPTERUS = ("Pagetopsis macropterus", "Pagetopsis macropterus")
    PAGRUS_MAJOR = ("Red seabream", "Pagrus major (red seabream)")
    PANGASIANODON_HYPOPHTHALMUS = ("Striped catfish", "Pangasianodon hypophthalmus (striped catfish)")
    PAN_PANISCUS = ("Pygmy chimpanzee", "Pan paniscus (pygmy chimpanzee)")
    PANTHERA_PARDUS = ("Leopard", "Panthera pardus (leopard)")
    PAN_TROGLODYTES = ("Chimpanzee", "Pan troglodytes (chimpanzee)")
    PAN_TROGLODYTES_VERUS = ("Western chimpanzee", "Pan troglodytes verus")
    PAPIO_ANUBIS = ("Olive baboon", "Papio anubis (olive baboon)")
    PAPIO_ANUBIS_ANUBIS = ("Olive baboon anubis", "Papio anubis anubis")
    PAPIO_HAMADRYAS = ("Hamadryas baboon", "Papio hamadryas (hamadryas baboon)")
    PAPIO_PAPIO = ("Guinea baboon", "Papio papio (Guinea baboon)")
    PARALICHTHYS_OLIVACEUS = ("Japanese flounder", "Paralichthys olivaceus (Japanese flounder)")
    PELODISCUS_SINENSIS = ("Chinese soft-shelled turtle", "Pelodiscus sinensis (Chinese soft-shelled turtle)")
    PELTEOBAGRUS_FULVIDRACO = ("Yellow catfish", "Pelteobagrus fulvidraco (yellow catfish)")
    PERDIX_PERDIX = ("Grey partridge", "Perdix perdix (grey partridge)")
    PEROMYSCUS_MANICULATUS = ("North American deer mouse", "Peromyscus maniculatus (North American deer mouse)")
    PETROMYZON_MARINUS = ("Sea lamprey", "Petromyzon marinus (sea lamprey)")
    PHASCOGALE_CALURA = ("Red-tailed phascogale", "Phascogale calura (red-tailed phascogale)")
    PHASIANUS_COLCHICUS = ("Ring-necked pheasant", "Phasianus colchicus (Ring-necked pheasant)")
    PHYSETER_CATODON = ("Sperm whale", "Physeter catodon (sperm whale)")
    PITHECIA_PITHECIA = ("White-faced saki", "Pithecia pithecia (white-faced saki)")
    PLATALEA_AJAJA = ("Roseate spoonbil", "Platalea ajaja")
    PLATYRRHINI = ("New World monkeys", "Platyrrhini (New World monkeys)")
    PLECOGLOSSUS_ALTIVELIS_ALTIVELIS = ("Ayu sweetfish", "Plecoglossus altivelis altivelis")
    PLEURODELES_WALTL = ("Iberian ribbed newt", "Pleurodeles waltl (Iberian ribbed newt)")
    POGONOPHRYNE_SCOTTI = ("Pogonophryne scotti", "Pogonophryne scotti")
    POLYPRION_OXYGENEIOS = ("Hāpuku", "Polyprion oxygeneios")
    PONGO_ABELII = ("Sumatran orangutan", "Pongo abelii (Sumatran orangutan)")
    PONGO_PYGMAEUS = ("Bornean orangutan", "Pongo pygmaeus (Bornean orangutan)")
    PRESBYTIS_COMATA = ("Grizzled leaf monkey", "Presbytis comata (grizzled leaf monkey)")
    PRESBYTIS_FEMORALIS = ("Banded leaf monkey", "Presbytis femoralis (banded leaf monkey)")
    PRESBYTIS_MELALOPHOS = ("Mitred leaf monkey", "Presbytis melalophos (mitred leaf monkey)")
    PROPITHECUS_VERREAUXI = ("White sifaka", "Propithecus verreauxi (white sifaka)")
    PROTOPTERUS_AETHIOPICUS = ("Marbled lungfish", "Protopterus aethiopicus (marbled lungfish)")
    PSEUDOBATOS_PRODUCTUS = ("Shovelnose guitarfish", "Pseudobatos productus (shovelnose guitarfish)")
    PTEROPUS_ALECTO = ("Black flying fox", "Pteropus alecto (black flying fox)")
    PYTHON_BIVITTATUS = ("Burmese python", "Python bivittatus (Burmese python)")
    RACHYCENTRON_CANADUM = ("Cobia", "Rachycentron canadum (cobia)")
    RAJA_EGLANTERIA = ("Clearnose skate", "Raja eglanteria (clearnose skate)")
    RATTUS_FUSCIPES = ("Bush rat", "Rattus fuscipes (bush rat)")
    RATTUS_LEUCOPUS = ("Mottle-tailed rat", "Rattus leucopus (mottle-tailed rat)")
    RATTUS_NORVEGICUS = ("Norway rat", "Rattus norvegicus (Norway rat)")
    RATTUS_RATTUS = ("Black rat", "Rattus rattus (black rat)")
    RATTUS_SORDIDUS = ("Australian dusky field rat", "Rattus sordidus (Australian dusky field rat)")
    RATTUS_SP = ("Rats", "Rattus sp. (rats)")
    RATTUS_TUNNEYI = ("Tunney's rat", "Rattus tunneyi (Tunney's rat)")
    RATTUS_VILLOSISSIMUS = ("Long-haired rat", "Rattus villosissimus (long-haired rat)")
    RHINOCEROS_UNICORNIS = ("Greater Indian rhinoceros", "Rhinoceros unicornis (greater Indian rhinoceros)")
    ROUSETTUS_LESCHENAULTII = ("Leschenault's rousette", "Rousettus leschenaultii (Leschenault's rousette)")
    SAGUINUS_LABIATUS = ("Red-chested mustached tamarin", "Saguinus labiatus (red-chested mustached tamarin)")
    SAGUINUS_MIDAS = ("Midas tamarin", "Saguinus midas (Midas tamarin)")
    SAGUINUS_OEDIPUS = ("Cotton-top tamarin", "Saguinus oedipus (cotton-top tamarin)")
    SAIMIRI_BOLIVIENSIS_BOLIVIENSIS = ("Bolivian squirrel monkey", "Saimiri boliviensis boliviensis (Bolivian squirrel monkey)")
    SAIMIRI_SCIUREUS = ("Common squirrel monkey", "Saimiri sciureus (common squirrel monkey)")
    SALMO_MARMORATUS = ("Salmo marmoratus", "Salmo marmoratus")
    SALMO_SALAR = ("Atlantic salmon", "Salmo salar (Atlantic salmon)")
    SALMO_TRUTTA = ("River trout", "Salmo trutta (river trout)")
    SALVELINUS_ALPINUS = ("Arctic char", "Salvelinus alpinus (Arctic char)")
    SANDER_VITREUS = ("Walleye", "Sander vitreus (walleye)")
    SAPAJUS_APELLA = ("Tufted capuchin", "Sapajus apella (Tufted capuchin)")
    SCIAENOPS_OCELLATUS = ("Red drum", "Sciaenops ocellatus (red drum)")
    SCOPHTHALMUS_MAXIMUS = ("Turbot", "Scophthalmus maximus (turbot)")
    SCYLIORHINUS_CANICULA = ("Smaller spotted catshark", "Scyliorhinus canicula (smaller spotted catshark)")
    SERIOLA_QUINQUERADIATA = ("Japanese amberjack", "Seriola quinqueradiata (Japanese amberjack)")
    SILURUS_ASOTUS = ("Amur catfish", "Silurus asotus (Amur catfish)")
    SILURUS_MERIDIONALIS = ("Silurus meridionalis", "Silurus meridionalis")
    SINIPERCA_CHUATSI = ("Mandarin fish", "Siniperca chuatsi (mandarin fish)")
    SOUSA_CHINENSIS = ("Indo-pacific humpbacked dolphin", "Sousa chinensis (Indo-pacific humpbacked dolphin)")
    SPARUS_AURATA = ("Gilthead seabream", "Sparus aurata (gilthead seabream)")
    SPHOEROIDES_NEPHELUS = ("Southern puffer", "Sphoeroides nephelus (southern puffer)")
    SQUALUS_ACANTHIAS = ("Spiny dogfish", "Squalus acanthias (spiny dogfish)")
    STEGASTES_LEUCOSTICTUS = ("Beaugregory", "Stegastes leucostictus (beaugregory)")
    STEGASTES_PARTITUS = ("Bicolor damselfish", "Stegastes partitus (bicolor damselfish)")
    STENELLA_ATTENUATA = ("Bridled dolphin", "Stenella attenuata (bridled dolphin)")
    STENELLA_COERULEOALBA = ("Striped dolphin", "Stenella coeruleoalba (striped dolphin)")
    STREPTOMYCES_VIRIDOCHROMOGENES = ("Streptomyces viridochromogenes", "Streptomyces viridochromogenes")
    STRUTHIO_CAMELUS = ("African ostrich", "Struthio camelus (African ostrich)")
    SUNCUS_MURINUS = ("House shrew", "Suncus murinus (house shrew)")
    SUS_SCROFA = ("Domestic pig", "Sus scrofa (pig)")
    SYLVILAGUS_CUNICULARIS = ("Mexican cottontail", "Sylvilagus cunicularis (Mexican cottontail)")
    SYLVILAGUS_FLORIDANUS = ("Eastern cottontail", "Sylvilagus floridanus (eastern cottontail)")
    SYMPHALANGUS_SYNDACTYLUS = ("Siamang", "Symphalangus syndactylus (siamang)")
    TACHYGLOSSUS_ACULEATUS = ("Australian echidna", "Tachyglossus aculeatus (Australian echidna)")
    TACHYSURUS_FULVIDRACO = ("Yellow catfish", "Tachysurus fulvidraco (yellow catfish)")
    TACHYSURUS_VACHELLII = ("Tachysurus vachellii", "Tachysurus vachellii")
    TAENIOPYGIA_GUTTATA = ("Zebra finch", "Taeniopygia guttata (zebra finch)")
    TAKIFUGU_RUBRIPES = ("Torafugu", "Takifugu rubripes (torafugu)")
    TARSIUS_DENTATUS = ("Dian's tarsier", "Tarsius dentatus (Dian's tarsier)")
    TARSIUS_LARIANG = ("Lariang tarsier", "Tarsius lariang (Lariang tarsier)")
    TARSIUS_SYRICHTA = ("Philippine tarsier", "Tarsius syrichta (Philippine tarsier)")
    TETRAODON_NIGROVIRIDIS = ("Spotted green pufferfish", "Tetraodon nigroviridis (spotted green pufferfish)")
    TRACHEMYS_SCRIPTA = ("Red-eared slider turtle", "Trachemys scripta (red-eared slider turtle)")
    TRACHEMYS_SCRIPTA_ELEGANS = ("Red-eared slider turtle elegans", "Trachemys scripta elegans")
    TRACHYPITHECUS_CRISTATUS = ("Silvery lutung", "Trachypithecus cristatus (Silvery lutung)")
    TRACHYPITHECUS_OBSCURUS = ("Dusky leaf-monkey", "Trachypithecus obscurus (Dusky leaf-monkey)")
    TREMATOMUS_BERNACCHII = ("Emerald rockcod", "Trematomus bernacchii (emerald rockcod)")
    TREMATOMUS_HANSONI = ("Striped rockcod", "Trematomus hansoni (striped rockcod)")
    TREMATOMUS_LOENNBERGII = ("Deepwater notothen", "Trematomus loennbergii (deepwater notothen)")
    TREMATOMUS_NEWNESI = ("Dusky notothen", "Trematomus newnesi (dusky notothen)")
    TREMATOMUS_PENNELLII = ("Sharp-spined notothen", "Trematomus pennellii (sharp-spined notothen)")
    TRIAKIS_SCYLLIUM = ("Banded houndshark", "Triakis scyllium (banded houndshark)")
    TRICHECHUS_MANATUS_LATIROSTRIS = ("Florida manatee", "Trichechus manatus latirostris (Florida manatee)")
    TRICHOSURUS_VULPECULA = ("Common brushtail", "Trichosurus vulpecula (common brushtail)")
    TURSIOPS_ADUNCUS = ("Indo-pacific bottlenose dolphin", "Tursiops aduncus (Indo-pacific bottlenose dolphin)")
    TURSIOPS_TRUNCATUS = ("Common bottlenose dolphin", "Tursiops truncatus (common bottlenose dolphin)")
    VICUGNA_PACOS = ("Alpaca", "Vicugna pacos (alpaca)")
    XENOPUS = ("Xenopus", "Xenopus")
    XENOPUS_LAEVIS = ("African clawed frog", "Xenopus laevis (African clawed frog)")
    XENOPUS_LAEVIS_OR_GILLI = ("African or Cape clawed frog", "Xenopus laevis/gilli")
    XENOPUS_SP = ("Clawed frog", "Xenopus sp. (clawed frog)")
    XENOPUS_TROPICALIS = ("Tropical clawed frog", "Xenopus tropicalis (tropical clawed frog)")

    def __init__(self, common_name: str, imgt_name: str):
        self.common_name = common_name
        self.imgt_name = imgt_name

    def __str__(self) -> str:
        return self.common_name

    def __lt__(self, other):
        if not isinstance(other, Species):
            return NotImplemented
        return self.name < other.name

    @property
    def scientific_name(self) -> str:
        """The IMGT organism string without its parenthesized common name."""
        return self.imgt_name.split(" (", 1)[0]

    @classmethod
    def from_imgt(cls, text: str) -> "Species | None":
        """
        Resolve an ``OS`` line value.

        Returns None for known non-species sources (vectors, synthetic
        constructs).

        Raises:
            UnknownSpeciesError: if the text is not recognized at all.
        """
        text = text.strip()
        if text in _BY_IMGT_NAME:
            return _BY_IMGT_NAME[text]
        if text in NON_SPECIES:
            return None
        raise UnknownSpeciesError(f"Not a species name: `{text}`")

    @classmethod
    def parse(cls, text: str) -> "Species":
        """Look up a species by member name, scientific, common or IMGT name."""
        key = text.strip().lower()
        for species in cls:
            if key in (
                species.name.lower(),
                species.scientific_name.lower(),
                species.common_name.lower(),
                species.imgt_name.lower(),
            ):
                return species
        raise UnknownSpeciesError(f"Unknown species: `{text}`")


_BY_IMGT_NAME = {species.imgt_name: species for species in Species}
