"""High-precision literals for ln 2, ln 3 and ln 10 (truncated, ~1000 digits).

Used by the constant cache when a request is shorter than the literal;
longer requests are computed through the atanh series.
"""

from __future__ import annotations

from decimal import Decimal

LOG_TWO = Decimal(
    "0.6931471805599453094172321214581765680755001343602552541206800094933936"
    "219696947156058633269964186875420014810205706857336855202357581305570326"
    "707516350759619307275708283714351903070386238916734711233501153644979552"
    "391204751726815749320651555247341395258829504530070953263666426541042391"
    "578149520437404303855008019441706416715186447128399681717845469570262716"
    "310645461502572074024816377733896385506952606683411372738737229289564935"
    "470257626520988596932019650585547647033067936544325476327449512504060694"
    "381471046899465062201677204245245296126879465461931651746813926725041038"
    "025462596568691441928716082938031727143677826548775664850856740776484514"
    "644399404614226031930967354025744460703080960850474866385231381816767514"
    "386674766478908814371419854942315199735488037516586127535291661000710535"
    "582498794147295092931138971559982056543928717000721808576102523688921324"
    "497138932037843935308877482597017155910708823683627589842589185353024363"
    "421436706118923678919237231467232172053401649256872747782344535347"
)

LOG_THREE = Decimal(
    "1.0986122886681096913952452369225257046474905578227494517346943336374942"
    "932186089668736157548137320887879700290659578657423680042259305198210528"
    "018707672774106031627691833813671793736988443609599037425703167959115211"
    "455919177506713470549401667755802222031702529468975606901065215056428681"
    "380363173732985777823669916547921318181490200301038236301222486527481982"
    "259910974524908964580534670088459650857484441190188570876474948670796130"
    "858294116021661211840014098255143919487688936798494302255731535329685345"
    "295251459213876494685932562794416556941578272310355168866102118469890439"
    "943063138255285736466882824988136822800634143910786893251456437510204451"
    "627561934973982116941585740535361758900975122233797736969687754354795135"
    "712982177017581242122351405810163272465588937249564919185242960796684234"
    "647069377237252655082032078333928055892853146873095132606458309184397496"
    "822230325765467533311823019649275257599132217851353390237482964339502546"
    "074245824934666866121881436526565429542767610505477795422933973323"
)

LOG_TEN = Decimal(
    "2.3025850929940456840179914546843642076011014886287729760333279009675726"
    "096773524802359972050895982983419677840422862486334095254650828067566662"
    "873690987816894829072083255546808437998948262331985283935053089653777326"
    "288461633662222876982198867465436674744042432743651550489343149393914796"
    "194044002221051017141748003688084012647080685567743216228355220114804663"
    "715659121373450747856947683463616792101806445070648000277502684916746550"
    "586856935673420670581136429224554405758925724208241314695689016758940256"
    "776311356919292033376587141660230105703089634572075440370847469940168269"
    "282808481184289314848524948644871927809676271275775397027668605952496716"
    "674183485704422507197965004714951050492214776567636938662976979522110718"
    "264549734772662425709429322582798502585509785265383207606726317164309505"
    "995087807523710333101197857547331541421808427543863591778117054309827482"
    "385045648019095610299291824318237525357709750539565187697510374970888692"
    "180205189339507238539205144634197265287286965110862571492198849978"
)
